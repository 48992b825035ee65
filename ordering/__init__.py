"""
Ordering - Creation de commandes avec inversion de dependances.

Ce package construit des commandes a partir d'un membre et d'une politique
de remise injectee. Le service de commande ne connait que des interfaces ;
les implementations concretes sont choisies par le container.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, exceptions)
- services/ : Couche application (creation de commande, gestion des membres)
- adapters/ : Implementations des politiques de remise
- infrastructure/ : Stockage des membres
"""

__version__ = "0.1.0"
