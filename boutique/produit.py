"""Products sold by the shop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

Ask = Callable[[str], str]


def _num(value: float) -> str:
    """Format a number with six significant digits, as a stream would."""
    return f"{value:g}"


@dataclass
class Produit:
    """A product with its price and stock quantity."""

    id_prd: int = 0
    nom_prd: str = ""
    description: str = ""
    prix: float = 0.0
    qte_stock: int = 0

    @classmethod
    def prompt(cls, ask: Ask = input) -> "Produit":
        """Build a product from answers given to ``ask``."""
        id_prd = int(ask("entrer l'id de produit :").strip())
        nom_prd = ask("entrer le nom de produit :").strip()
        description = ask("entrer la description de produit :").strip()
        prix = float(ask("entrer le prix de produit :").strip())
        qte_stock = int(ask("entrer la quantite de stock de produit :").strip())
        return cls(id_prd, nom_prd, description, prix, qte_stock)

    def details(self) -> str:
        """Return the full display block for this product."""
        return (
            "........affichage de produit........\n"
            f"nom de produit :{self.nom_prd}\n"
            f"id de produit :{self.id_prd}\n"
            f"description de produit :{self.description}\n"
            f"prix de produit :{_num(self.prix)}\n"
            f"quantite disponible de produit :{self.qte_stock}\n"
        )

    def modify(self, description: str, prix: float, qte_stock: int) -> None:
        """Change the description, price and stock quantity."""
        self.description = description
        self.prix = prix
        self.qte_stock = qte_stock

    def __add__(self, other: "Produit") -> "Produit":
        if not isinstance(other, Produit):
            return NotImplemented
        return Produit(
            id_prd=self.id_prd + other.id_prd,
            nom_prd=f"{self.nom_prd} & {other.nom_prd}",
            description=f"{self.description} + {other.description}",
            prix=self.prix + other.prix,
            qte_stock=min(self.qte_stock, other.qte_stock),
        )

    def __str__(self) -> str:
        return (
            f"l'id de produit : {self.id_prd}\n"
            f"le nom de produit : {self.nom_prd}\n"
            f"le description de produit : {self.description}\n"
            f"le prix de produit : {_num(self.prix)}\n"
            f"quantite de produit : {self.qte_stock}\n"
        )