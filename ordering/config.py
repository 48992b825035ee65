"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe ORDERING_,
et peut optionnellement etre fournie via un fichier .env.

La politique de remise injectee dans le service de commande est choisie ici
("fix" ou "rate"), jamais dans le service lui-meme.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env a la racine du projet (parent de ordering/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe ORDERING_.
    Exemple : ORDERING_DISCOUNT_POLICY=rate

    Les chemins sont automatiquement etendus (~ -> repertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="ORDERING_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Politique de remise
    discount_policy: Literal["fix", "rate"] = Field(default="fix")
    fix_discount_amount: int = Field(default=1000, ge=0)
    rate_discount_percent: int = Field(default=10, ge=0, le=100)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/ordering.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Etend ~ vers le repertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("discount_policy", mode="before")
    @classmethod
    def normalize_policy(cls, v: str) -> str:
        """Accepte le nom de politique sans tenir compte de la casse."""
        return v.strip().lower() if isinstance(v, str) else v
