"""Customer orders made of products."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from boutique.produit import Produit

Ask = Callable[[str], str]

DEFAULT_PATH = "commande.txt"


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass
class Commande:
    """An order: id, status, running total and its products."""

    id_cmd: int = 0
    statut: str = ""
    total: float = 0.0
    produits: list[Produit] = field(default_factory=list)

    @classmethod
    def prompt(cls, ask: Ask = input) -> "Commande":
        """Build an order from the id and status given to ``ask``."""
        id_cmd = int(ask("id commande : ").strip())
        statut = ask("statut commande : ").strip()
        return cls(id_cmd, statut)

    def add(self, produit: Produit) -> None:
        """Add a copy of ``produit`` and raise the total by its price."""
        self.produits.append(_copy.copy(produit))
        self.total += produit.prix

    def copy(self) -> "Commande":
        """Return an independent copy, products included."""
        return Commande(
            self.id_cmd,
            self.statut,
            self.total,
            [_copy.copy(p) for p in self.produits],
        )

    def details(self) -> str:
        """Return the full display block for this order."""
        head = (
            "affichage de commande :\n"
            f"id de commande :{self.id_cmd}\n"
            f"statut de commande :{self.statut}\n"
            f"prix total de commande :{_num(self.total)}\n"
            "affichage des produits :\n"
        )
        return head + "".join(p.details() for p in self.produits)

    def __str__(self) -> str:
        head = (
            f"l'id de commande : {self.id_cmd}\n"
            f"le statut de commande : {self.statut}\n"
            f"le prix total de commande : {_num(self.total)}\n"
            "\n********affichage des produits de la commande********\n"
        )
        return head + "".join(p.details() for p in self.produits) + " \n"

    def save(self, path: str | Path = DEFAULT_PATH) -> Path:
        """Write every product to ``path``, replacing its contents."""
        target = Path(path)
        with target.open("w", encoding="utf-8") as out:
            for produit in self.produits:
                out.write(f"{produit}\n")
        return target


def read_file(path: str | Path = DEFAULT_PATH) -> list[str]:
    """Return the lines of a saved order file."""
    with Path(path).open(encoding="utf-8") as src:
        return [line.rstrip("\n") for line in src]