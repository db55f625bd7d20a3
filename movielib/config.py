"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe MOVIELIB_,
et peut optionnellement être fournie via un fichier .env.

La clé API OMDb est optionnelle : sans elle, les entrées du catalogue gardent
le titre et l'année devinés depuis le nom de fichier.
"""

from pathlib import Path
from typing import Annotated, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from movielib.utils.constants import DEFAULT_VIDEO_EXTENSIONS

# Trouver le fichier .env à la racine du projet (parent de movielib/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MOVIELIB_.
    Exemple : MOVIELIB_LOG_LEVEL=DEBUG

    La clé OMDb est aussi lue depuis OMDB_API_KEY (sans préfixe).
    """

    model_config = SettingsConfigDict(
        env_prefix="MOVIELIB_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Base de données
    database_url: str = Field(default="sqlite:///movs.db")

    # OMDb (OPTIONNEL - enrichissement désactivé si non défini)
    omdb_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("MOVIELIB_OMDB_API_KEY", "OMDB_API_KEY"),
    )
    omdb_base_url: str = Field(default="http://www.omdbapi.com/")
    omdb_timeout_seconds: float = Field(default=10.0, gt=0)

    # Scan
    # Liste separee par des virgules dans l'environnement (ex: ".mkv,.webm")
    video_extensions: Annotated[tuple[str, ...], NoDecode] = Field(
        default=DEFAULT_VIDEO_EXTENSIONS
    )
    scan_timeout_seconds: Optional[float] = Field(default=None, gt=0)

    # Serveur web
    host: str = Field(default="localhost")
    port: int = Field(default=8080, ge=1, le=65535)
    cors_origin_regex: str = Field(default=r"https?://.*")

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/movielib.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("video_extensions", mode="before")
    @classmethod
    def split_extensions(cls, v: str | tuple[str, ...] | list[str]) -> tuple[str, ...]:
        """Découpe la forme ".mkv,.avi" lue depuis l'environnement."""
        if isinstance(v, str):
            return tuple(v.split(","))
        return tuple(v)

    @field_validator("video_extensions", mode="after")
    @classmethod
    def normalize_extensions(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Met les extensions en minuscules et ajoute le point initial si absent."""
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return tuple(normalized)

    @property
    def omdb_enabled(self) -> bool:
        """Vérifie si l'API OMDb est configurée."""
        return bool(self.omdb_api_key)
