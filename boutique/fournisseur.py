"""Suppliers of the shop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

Ask = Callable[[str], str]


@dataclass
class Fournisseur:
    """A supplier identified by id, name and contact."""

    id_fourn: int = 0
    nom_fourn: str = ""
    contact: str = ""

    @classmethod
    def prompt(cls, ask: Ask = input) -> "Fournisseur":
        """Build a supplier from answers given to ``ask``."""
        id_fourn = int(ask("entrer l'id de fournisseur : ").strip())
        nom_fourn = ask("entrer le nom de fournisseur : ").strip()
        contact = ask("entrer le contact de fournisseur : ").strip()
        return cls(id_fourn, nom_fourn, contact)

    def details(self) -> str:
        """Return the full display block for this supplier."""
        return (
            "affichage de fournisseur :\n"
            f"nom de fournisseur :{self.nom_fourn}\n"
            f"id de fournisseur :{self.id_fourn}\n"
            f"contact de fournisseur :{self.contact}\n"
        )

    def fournir_produit(self) -> str:
        """Describe the supplier delivering a product."""
        return f"{self.nom_fourn} fournit un produit."

    def envoyer_facture(self) -> str:
        """Describe the supplier sending an invoice."""
        return f"facture envoyer par {self.nom_fourn}"

    def __str__(self) -> str:
        return (
            f"ID Fournisseur: {self.id_fourn}\n"
            f"Nom Fournisseur: {self.nom_fourn}\n"
            f"Contact: {self.contact}\n"
        )