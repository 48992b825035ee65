"""
Stockage des membres pour Ordering.

Ce module fournit l'implementation par defaut de IMemberRepository :

- member_repository.py : Repository en memoire (dictionnaire indexe par ID)

Usage:
    from ordering.infrastructure.persistence import InMemoryMemberRepository

    repo = InMemoryMemberRepository()
    repo.save(Member(id=1, name="Alice", grade=Grade.VIP))
"""

from ordering.infrastructure.persistence.member_repository import (
    InMemoryMemberRepository,
)

__all__ = [
    "InMemoryMemberRepository",
]
