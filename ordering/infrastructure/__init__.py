"""
Couche infrastructure de Ordering.

Ce module contient les implementations concretes des ports de stockage
definis dans la couche domaine :

- persistence/ : Stockage des membres (en memoire par defaut)

Architecture hexagonale : un autre backend peut remplacer le stockage
en memoire sans modifier la logique metier, il suffit de surcharger
le provider member_repository du container.
"""
