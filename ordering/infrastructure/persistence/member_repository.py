"""
Implementation en memoire du repository Member.

Implemente l'interface IMemberRepository avec un dictionnaire indexe
par ID de membre. Le stockage vit le temps du processus ; aucun verrou
n'est pris, l'acces concurrent n'est pas garanti.
"""

from typing import Optional

from ordering.core.entities.member import Member
from ordering.core.ports.repositories import IMemberRepository


class InMemoryMemberRepository(IMemberRepository):
    """
    Repository en memoire pour les membres.

    Les membres sont immutables, ils sont donc stockes tels quels
    sans copie.
    """

    def __init__(self) -> None:
        self._store: dict[int, Member] = {}

    def save(self, member: Member) -> Member:
        """Sauvegarde un membre (insertion ou remplacement par ID)."""
        self._store[member.id] = member
        return member

    def find_by_id(self, member_id: int) -> Optional[Member]:
        """Recupere un membre par son ID."""
        return self._store.get(member_id)

    def count(self) -> int:
        """Retourne le nombre de membres stockes."""
        return len(self._store)

    def clear(self) -> None:
        """Vide le stockage."""
        self._store.clear()
