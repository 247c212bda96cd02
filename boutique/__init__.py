"""Shop model: products, orders, suppliers and staff, with a console session."""

__version__ = "0.1.0"
__all__ = ["cli", "commande", "fournisseur", "produit", "utilisateur"]