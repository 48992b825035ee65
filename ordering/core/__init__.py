"""
Couche domaine (core).

Contient les entites metier, ports (interfaces abstraites) et exceptions.
Cette couche n'a AUCUNE dependance vers l'infrastructure ou les adaptateurs.

Sous-packages :
- entities/ : Entites metier (Member, Order)
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
- exceptions : Erreurs metier (MemberNotFoundError)
"""
