"""
Service de gestion des membres.

Inscrit les membres dans le repository injecte et fournit une recherche
stricte qui leve MemberNotFoundError au lieu de retourner None.
"""

from loguru import logger

from ordering.core.entities.member import Member
from ordering.core.exceptions import MemberNotFoundError
from ordering.core.ports.repositories import IMemberRepository


class MemberService:
    """
    Service d'inscription et de recherche des membres.

    Example:
        service = MemberService(member_repository=repo)
        service.join(Member(id=1, name="Alice", grade=Grade.VIP))
        member = service.find_member(1)
    """

    def __init__(self, member_repository: IMemberRepository) -> None:
        self._member_repository = member_repository

    def join(self, member: Member) -> Member:
        """Inscrit un membre (remplace un membre existant de meme ID)."""
        saved = self._member_repository.save(member)
        logger.debug(
            "Membre inscrit",
            member_id=saved.id,
            grade=saved.grade.name,
        )
        return saved

    def find_member(self, member_id: int) -> Member:
        """
        Recupere un membre par son ID.

        Raises:
            MemberNotFoundError: si aucun membre ne correspond
        """
        member = self._member_repository.find_by_id(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)
        return member
