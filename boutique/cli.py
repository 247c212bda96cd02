"""Interactive walk-through of users, products, orders and suppliers."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator

from boutique.commande import DEFAULT_PATH, Commande, read_file
from boutique.fournisseur import Fournisseur
from boutique.produit import Produit
from boutique.utilisateur import Gerant, Utilisateur, Vendeur


def _tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


class _TokenAsker:
    """Prompt, then hand out the next whitespace-separated word of input."""

    def __init__(self) -> None:
        self._words = _tokens()

    def __call__(self, prompt: str) -> str:
        print(prompt, end="", flush=True)
        try:
            return next(self._words)
        except StopIteration:
            raise EOFError("fin de l'entree") from None


def _section(title: str) -> None:
    print(f"\n-----------------{title}-----------------")


def _save_and_show(commande: Commande, path: str) -> None:
    try:
        commande.save(path)
        print("fichier commande creer avec success")
    except OSError:
        print("erreur du creation de fichier")
    try:
        for line in read_file(path):
            print(line)
        print("fin de lecture des produits")
    except OSError:
        print("erreur d'ouverture")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive session; return the exit status."""
    parser = argparse.ArgumentParser(prog="boutique")
    parser.add_argument("--fichier", default=DEFAULT_PATH, help="order file to write")
    args = parser.parse_args(argv)
    ask = _TokenAsker()

    try:
        _section("saisir d'utilisateur")
        u1 = Utilisateur.read(ask)
        _section("affichage d'utilisateur")
        print(u1, end="")

        _section("saisir de vendeur")
        v1 = Vendeur.read(ask)
        _section("affichage de vendeur")
        print(v1)

        _section("saisir de produit 1")
        p1 = Produit.prompt(ask)
        _section("saisir de produit 2")
        p2 = Produit.prompt(ask)
        p3 = p1 + p2
        _section("affichage de produit total ")
        print(p3.details(), end="")

        _section("saisir de commande")
        c1 = Commande.prompt(ask)
        c1.add(p1)
        c1.add(p2)
        c2 = c1.copy()
        c2.add(p3)
        _section("affichage de commande 1")
        print(c1, end="")
        _section("affichage de fichier\t")
        _save_and_show(c1, args.fichier)
        _section("affichage de commande 2")
        print(c2, end="")

        _section("saisir de gerant")
        g1 = Gerant.read(ask)
        _section("saisir de fournisseur 1")
        f1 = Fournisseur.prompt(ask)
        _section("saisir de fournisseur 2")
        f2 = Fournisseur.prompt(ask)
        g1.add_fournisseur(f1)
        g1.add_fournisseur(f2)
        _section("affichage de gerant")
        print(g1)
    except (EOFError, ValueError) as exc:
        print(f"\nerreur de saisie : {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())