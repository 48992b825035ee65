"""
Entite membre.

Un membre est le client qui passe les commandes. Son grade decide si
une politique de remise lui accorde quelque chose.
"""

from dataclasses import dataclass
from enum import Enum


class Grade(Enum):
    """Grade d'un membre (determine l'eligibilite aux remises)."""

    BASIC = "basic"
    VIP = "vip"


@dataclass(frozen=True)
class Member:
    """
    Client enregistre dans le stockage des membres.

    Attributs :
        id : Identifiant numerique du membre
        name : Nom affiche
        grade : Grade du membre (BASIC ou VIP)
    """

    id: int
    name: str
    grade: Grade = Grade.BASIC

    @property
    def is_vip(self) -> bool:
        """Verifie si le membre a le grade VIP."""
        return self.grade is Grade.VIP
