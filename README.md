# boutique

A small model of a shop, made of four modules:

- `boutique.produit`: `Produit`, a product with id, name, description, price
  and stock quantity.
- `boutique.commande`: `Commande`, an order holding products and a running
  total, plus `read_file` to read a saved order file back.
- `boutique.fournisseur`: `Fournisseur`, a supplier with id, name and contact.
- `boutique.utilisateur`: `Utilisateur` and its kinds `Vendeur` (with a
  salary), `Gerant` (with a list of suppliers) and `Commercial` (a seller with
  a contact).

An interactive console session, `boutique.cli`, works through all of them.
The messages and prompts are in French.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Console session

```
boutique
```

The session reads answers as whitespace-separated words from standard input,
so a name or description cannot contain spaces. It asks for the following, in
this order:

1. A user: id, name, e-mail, role.
2. A seller: id, name, e-mail, salary.
3. Two products, which it then combines into a third.
4. An order: id and status.

It adds the first two products to the order. It then copies the order and adds
the combined product to the copy. Both orders are displayed. The products of
the first order are written to `commande.txt` in the current directory and
read back. Use `--fichier PATH` to write to another file.

Finally it asks for a manager (id, name, e-mail) and two suppliers, and
displays the manager's supplier list.

If the input ends early or a number cannot be read, the session prints an
error to standard error and exits with status 1.

## Library use

```python
from boutique.produit import Produit
from boutique.commande import Commande, read_file
from boutique.fournisseur import Fournisseur
from boutique.utilisateur import Gerant

a = Produit(1, "stylo", "bleu", 1.5, 10)
b = Produit(2, "cahier", "a4", 3.0, 4)
combined = a + b        # ids and prices summed, names joined, lowest stock kept

order = Commande(1, "en_cours")
order.add(a)
order.add(b)            # the order total follows the prices added
print(order)

order.save("commande.txt")
print(read_file("commande.txt"))

manager = Gerant(1, "alice", "alice@example.com")
manager.add_fournisseur(Fournisseur(7, "papeterie", "contact@example.com"))
manager.find_fournisseur(7)      # position in the list
manager.remove_fournisseur(7)    # removes and returns the supplier
```

- `add` on an order and `add_fournisseur` on a manager store copies, so later
  changes to the object that was passed in do not affect them.
- `Commande.copy()` returns an independent copy, products included.
- Calling `find_fournisseur` or `remove_fournisseur` with an id that is not in
  the list raises `LookupError`.
- Every class has `__str__` for its short listing; `Produit`, `Commande`,
  `Fournisseur`, `Utilisateur`, `Vendeur` and `Commercial` also have
  `details()` for the full display block.
- `Produit.prompt`, `Commande.prompt`, `Fournisseur.prompt` and the `read`
  class methods of the user classes build objects from answers given to a
  callable that takes a prompt and returns a string (`input` by default).
  `Utilisateur.fill` and `Utilisateur.login` fill an existing user the same
  way.

## What it does not do

Nothing is stored apart from the order file: users, sellers, managers and
suppliers live only in memory for the length of the session. The order file
is plain text for reading back; orders cannot be loaded from it again.