"""Users of the shop: plain users, sellers, managers and sales agents."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field
from typing import Callable

from boutique.fournisseur import Fournisseur

Ask = Callable[[str], str]

_LOGIN_PROMPTS = ("Entrer votre email :\n", "Entrer votre mot de passe :\n")


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass
class Utilisateur:
    """A user account with identity, credentials and role."""

    id: int = 0
    nom: str = ""
    email: str = ""
    pwd: str = field(default_factory=str, repr=False)
    role: str = ""

    @classmethod
    def read(cls, ask: Ask = input) -> "Utilisateur":
        """Build a user from id, name, e-mail and role given to ``ask``."""
        id_ = int(ask("saisir l'id d'utilisateur : ").strip())
        nom = ask("saisir le nom d'utilisateur : ").strip()
        email = ask("saisir l'email d'utilisateur : ").strip()
        role = ask("saisir le role d'utilisateur : ").strip()
        return cls(id=id_, nom=nom, email=email, role=role)

    def fill(self, ask: Ask = input) -> None:
        """Ask for name, id, e-mail and role and store the answers."""
        self.nom = ask("saisir le nom :").strip()
        self.id = int(ask("saisir l'id :").strip())
        self.email = ask("saisir l'email :").strip()
        self.role = ask("saisir le role ").strip()

    def login(self, ask: Ask = input) -> None:
        """Ask for e-mail and password and store them."""
        email_prompt, second_prompt = _LOGIN_PROMPTS
        self.email = ask(email_prompt).strip()
        answer = ask(second_prompt).strip()
        self.pwd = answer

    def details(self) -> str:
        """Return the full display block for this user."""
        return (
            f"nom :{self.nom}\n"
            f"id :{self.id}\n"
            f"email :{self.email}\n"
            f"role :{self.role}\n"
        )

    def __str__(self) -> str:
        return (
            f"id d'utilisateur : {self.id}\n"
            f"nom d'utilisateur : {self.nom}\n"
            f"email d'utilisateur : {self.email}\n"
            f"role d'utilisateur : {self.role}\n"
        )


@dataclass
class Vendeur(Utilisateur):
    """A seller: a user with a salary."""

    salaire: float = 0.0

    @classmethod
    def read(cls, ask: Ask = input) -> "Vendeur":
        """Build a seller from id, name, e-mail and salary given to ``ask``."""
        id_ = int(ask("saisir l'id de vendeur : ").strip())
        nom = ask("saisir le nom de vendeur : ").strip()
        email = ask("saisir l'email de vendeur : ").strip()
        salaire = float(ask("saisir le salaire de vendeur : ").strip())
        return cls(id=id_, nom=nom, email=email, salaire=salaire)

    def fill(self, ask: Ask = input) -> None:
        """Ask for the user fields, then the salary."""
        super().fill(ask)
        self.salaire = float(ask("saisir le salaire de vendeur :").strip())

    def details(self) -> str:
        """Return the user block followed by the salary."""
        return super().details() + f"le salaire de vendeur :{_num(self.salaire)}\n"

    def __str__(self) -> str:
        return (
            f"id de vendeur : {self.id}\n"
            f"nom de vendeur : {self.nom}\n"
            f"email de vendeur : {self.email}\n"
            f"salaire de vendeur : {_num(self.salaire)}"
        )


@dataclass
class Gerant(Utilisateur):
    """A manager who keeps a list of suppliers."""

    fournisseurs: list[Fournisseur] = field(default_factory=list)

    @classmethod
    def read(cls, ask: Ask = input) -> "Gerant":
        """Build a manager from id, name and e-mail given to ``ask``."""
        id_ = int(ask("saisir l'id de gerant : ").strip())
        nom = ask("saisir le nom de gerant : ").strip()
        email = ask("saisir l'email de gerant : ").strip()
        return cls(id=id_, nom=nom, email=email)

    def add_fournisseur(self, fournisseur: Fournisseur) -> None:
        """Append a copy of ``fournisseur`` to the list."""
        self.fournisseurs.append(_copy.copy(fournisseur))

    def find_fournisseur(self, id_fourn: int) -> int:
        """Return the position of the first supplier with ``id_fourn``."""
        for position, fournisseur in enumerate(self.fournisseurs):
            if fournisseur.id_fourn == id_fourn:
                return position
        raise LookupError("Aucun fournisseur trouver avec ce id ")

    def remove_fournisseur(self, id_fourn: int) -> Fournisseur:
        """Remove and return the first supplier with ``id_fourn``."""
        return self.fournisseurs.pop(self.find_fournisseur(id_fourn))

    def __str__(self) -> str:
        head = (
            f"id de gerant : {self.id}\n"
            f"nom de gerant : {self.nom}\n"
            f"email de gerant : {self.email}\n"
            "\n********affichage de liste de fournisseur********\n"
        )
        return head + "".join(
            f"{fournisseur}------------------------\n" for fournisseur in self.fournisseurs
        )


@dataclass
class Commercial(Vendeur):
    """A sales agent: a seller who also has a supplier contact."""

    contact: str = ""

    def fill(self, ask: Ask = input) -> None:
        """Ask for the seller fields, then the contact."""
        super().fill(ask)
        self.contact = ask("entrer le contact de commercial : ").strip()

    def details(self) -> str:
        """Return the seller block followed by the contact."""
        return super().details() + f"entrer le contact de commercial : {self.contact}\n"