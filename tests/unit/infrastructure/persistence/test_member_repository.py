"""Tests pour InMemoryMemberRepository."""

from ordering.core.entities import Grade, Member
from ordering.core.ports import IMemberRepository
from ordering.infrastructure.persistence import InMemoryMemberRepository


class TestInMemoryMemberRepository:
    """Tests pour le repository en memoire."""

    def test_implements_port(self):
        """Le repository implemente IMemberRepository."""
        assert isinstance(InMemoryMemberRepository(), IMemberRepository)

    def test_save_then_find(self, vip_member):
        """find_by_id retourne le membre sauvegarde."""
        repo = InMemoryMemberRepository()
        saved = repo.save(vip_member)

        assert saved == vip_member
        assert repo.find_by_id(1) == vip_member

    def test_find_missing_returns_none(self):
        """find_by_id retourne None quand inexistant."""
        assert InMemoryMemberRepository().find_by_id(999) is None

    def test_save_replaces_same_id(self):
        """Une seconde sauvegarde avec le meme ID remplace la premiere."""
        repo = InMemoryMemberRepository()
        repo.save(Member(id=1, name="memberA", grade=Grade.BASIC))
        repo.save(Member(id=1, name="memberA", grade=Grade.VIP))

        assert repo.count() == 1
        assert repo.find_by_id(1).grade is Grade.VIP

    def test_clear(self, member_repository):
        """clear vide le stockage."""
        assert member_repository.count() == 2
        member_repository.clear()
        assert member_repository.count() == 0
        assert member_repository.find_by_id(1) is None

    def test_instances_are_isolated(self, vip_member):
        """Deux instances ne partagent pas leur stockage."""
        first = InMemoryMemberRepository()
        second = InMemoryMemberRepository()
        first.save(vip_member)
        assert second.find_by_id(vip_member.id) is None
