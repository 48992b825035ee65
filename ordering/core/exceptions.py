"""
Exceptions metier du domaine.
"""


class MemberNotFoundError(LookupError):
    """
    Exception levee quand un membre est introuvable dans le repository.

    Attributes:
        member_id: Identifiant du membre recherche
    """

    def __init__(self, member_id: int) -> None:
        """
        Initialise l'erreur avec l'identifiant recherche.

        Args:
            member_id: Identifiant du membre introuvable
        """
        self.member_id = member_id
        super().__init__(f"Membre introuvable: {member_id}")
