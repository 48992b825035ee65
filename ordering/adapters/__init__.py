"""
Adaptateurs : implementations concretes des ports du domaine.

- discount/ : Politiques de remise (montant fixe, pourcentage)
"""
