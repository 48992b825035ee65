"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) definissant les contrats pour le stockage des membres.
Les implementations (adaptateurs) fourniront les mecanismes de stockage concrets
(en memoire par defaut, autre backend fourni par l'assembleur).
"""

from abc import ABC, abstractmethod
from typing import Optional

from ordering.core.entities.member import Member


class IMemberRepository(ABC):
    """
    Interface de stockage des membres.

    Definit les operations pour enregistrer et retrouver les entites Member.
    """

    @abstractmethod
    def save(self, member: Member) -> Member:
        """Sauvegarde un membre (insertion ou remplacement par ID)."""
        ...

    @abstractmethod
    def find_by_id(self, member_id: int) -> Optional[Member]:
        """Recupere un membre par son ID. Retourne None si absent."""
        ...
