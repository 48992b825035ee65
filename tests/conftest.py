"""
Fixtures pytest partagees pour les tests Ordering.

Ce module contient les fixtures communes utilisees dans les tests:
- Membres types (VIP, BASIC)
- Repository en memoire pre-rempli
- Mocks des interfaces (IMemberRepository, IDiscountPolicy)
- Settings de test isoles de l'environnement, avec chemins temporaires
"""

import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from ordering.config import Settings
from ordering.core.entities import Grade, Member
from ordering.core.ports import IDiscountPolicy, IMemberRepository
from ordering.infrastructure.persistence import InMemoryMemberRepository


@pytest.fixture
def vip_member() -> Member:
    """Membre VIP d'identifiant 1."""
    return Member(id=1, name="memberA", grade=Grade.VIP)


@pytest.fixture
def basic_member() -> Member:
    """Membre BASIC d'identifiant 2."""
    return Member(id=2, name="memberB", grade=Grade.BASIC)


@pytest.fixture
def member_repository(vip_member: Member, basic_member: Member) -> InMemoryMemberRepository:
    """Repository en memoire contenant les membres VIP et BASIC."""
    repo = InMemoryMemberRepository()
    repo.save(vip_member)
    repo.save(basic_member)
    return repo


@pytest.fixture
def mock_member_repository() -> MagicMock:
    """
    Mock de IMemberRepository pour les tests.

    find_by_id retourne None par defaut (membre introuvable).
    """
    mock = MagicMock(spec=IMemberRepository)
    mock.find_by_id.return_value = None
    return mock


@pytest.fixture
def mock_discount_policy() -> MagicMock:
    """
    Mock de IDiscountPolicy pour les tests.

    Retourne une remise de 0 par defaut.
    """
    mock = MagicMock(spec=IDiscountPolicy)
    mock.discount.return_value = 0
    return mock


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Supprime toutes les variables ORDERING_* de l'environnement du test."""
    for name in list(os.environ):
        if name.upper().startswith("ORDERING_"):
            monkeypatch.delenv(name)


@pytest.fixture
def test_settings(tmp_path: Path, clean_env: None) -> Settings:
    """
    Settings de test avec un fichier de log temporaire.

    Ignore le fichier .env et les variables ORDERING_* du poste de travail ;
    tmp_path isole le fichier de log de chaque test.
    """
    return Settings(
        _env_file=None,
        discount_policy="fix",
        fix_discount_amount=1000,
        rate_discount_percent=10,
        log_level="DEBUG",
        log_file=tmp_path / "logs" / "test.log",
    )
