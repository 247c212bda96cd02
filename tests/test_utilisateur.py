import pytest

from boutique.fournisseur import Fournisseur
from boutique.utilisateur import Commercial, Gerant, Utilisateur, Vendeur


def scripted(answers):
    prompts = []
    queue = list(answers)

    def ask(prompt):
        prompts.append(prompt)
        return queue.pop(0)

    ask.prompts = prompts
    return ask


def test_utilisateur_read_order_and_values():
    ask = scripted(["4", "alice", "alice@example.com", "admin"])
    user = Utilisateur.read(ask)
    assert (user.id, user.nom, user.email, user.role) == (4, "alice", "alice@example.com", "admin")
    assert ask.prompts[0] == "saisir l'id d'utilisateur : "
    assert ask.prompts[3] == "saisir le role d'utilisateur : "


def test_utilisateur_fill_asks_name_first():
    ask = scripted(["bob", "9", "bob@example.com", "client"])
    user = Utilisateur()
    user.fill(ask)
    assert user.nom == "bob"
    assert user.id == 9
    assert ask.prompts == ["saisir le nom :", "saisir l'id :", "saisir l'email :", "saisir le role "]


def test_utilisateur_fill_rejects_bad_id():
    with pytest.raises(ValueError):
        Utilisateur().fill(scripted(["bob", "abc", "bob@example.com", "client"]))


def test_login_stores_credentials():
    password = "password"
    user = Utilisateur()
    user.login(scripted(["x@example.com", password]))
    assert user.email == "x@example.com"
    assert user.pwd == password


def test_utilisateur_str_and_details():
    user = Utilisateur(1, "alice", "alice@example.com", role="admin")
    assert str(user) == (
        "id d'utilisateur : 1\n"
        "nom d'utilisateur : alice\n"
        "email d'utilisateur : alice@example.com\n"
        "role d'utilisateur : admin\n"
    )
    assert user.details() == "nom :alice\nid :1\nemail :alice@example.com\nrole :admin\n"


def test_vendeur_read_and_str_has_no_trailing_newline():
    vendeur = Vendeur.read(scripted(["2", "bob", "bob@example.com", "1500"]))
    assert vendeur.salaire == 1500.0
    assert str(vendeur) == (
        "id de vendeur : 2\n"
        "nom de vendeur : bob\n"
        "email de vendeur : bob@example.com\n"
        "salaire de vendeur : 1500"
    )


def test_vendeur_fill_and_details_extend_user():
    vendeur = Vendeur()
    vendeur.fill(scripted(["bob", "2", "bob@example.com", "vente", "1200.5"]))
    assert vendeur.salaire == 1200.5
    assert vendeur.details().startswith(Utilisateur.details(vendeur))
    assert vendeur.details().endswith("le salaire de vendeur :1200.5\n")


def test_gerant_read():
    gerant = Gerant.read(scripted(["3", "carol", "carol@example.com"]))
    assert (gerant.id, gerant.nom, gerant.email) == (3, "carol", "carol@example.com")
    assert gerant.fournisseurs == []


def test_gerant_add_keeps_a_copy():
    gerant = Gerant()
    fournisseur = Fournisseur(20, "acme", "c1")
    gerant.add_fournisseur(fournisseur)
    fournisseur.nom_fourn = "changed"
    assert gerant.fournisseurs[0].nom_fourn == "acme"


def test_gerant_find_and_remove():
    gerant = Gerant()
    for f in (Fournisseur(20, "acme", "c1"), Fournisseur(21, "globex", "c2")):
        gerant.add_fournisseur(f)
    assert gerant.find_fournisseur(21) == 1
    removed = gerant.remove_fournisseur(20)
    assert removed.nom_fourn == "acme"
    assert [f.id_fourn for f in gerant.fournisseurs] == [21]


def test_gerant_missing_supplier_raises():
    gerant = Gerant()
    with pytest.raises(LookupError, match="Aucun fournisseur"):
        gerant.find_fournisseur(5)
    with pytest.raises(LookupError):
        gerant.remove_fournisseur(5)


def test_gerant_str_lists_suppliers():
    gerant = Gerant(3, "carol", "carol@example.com")
    f = Fournisseur(20, "acme", "c1")
    gerant.add_fournisseur(f)
    text = str(gerant)
    assert text.startswith("id de gerant : 3\nnom de gerant : carol\n")
    assert "\n********affichage de liste de fournisseur********\n" in text
    assert text.endswith(str(f) + "------------------------\n")


def test_commercial_fill_and_details():
    agent = Commercial()
    agent.fill(scripted(["dan", "5", "dan@example.com", "vente", "900", "c9"]))
    assert agent.contact == "c9"
    assert agent.salaire == 900.0
    assert agent.details().endswith("entrer le contact de commercial : c9\n")
    assert agent.details().startswith(Vendeur.details(agent))