# ----------------------------------------------------------------
# Import configuration variables to be used throughout the project
# ----------------------------------------------------------------
import os
from dotenv import load_dotenv

# Load .env (allow container env to override file values)
load_dotenv(override=True)


def _rstrip_slash(s: str) -> str:
    return (s or "").rstrip("/")


def _get_bool(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return str(v).strip().lower() in {"1", "true", "yes", "on", "y"}


def _get_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _get_list(name: str) -> list[str]:
    return [s.strip() for s in os.getenv(name, "").split(",") if s.strip()]


class Settings:
    # ── WooCommerce / WordPress ──────────────────────────────────────────────
    WC_BASE_URL: str = _rstrip_slash(os.getenv("WC_BASE_URL", ""))
    WC_API_KEY: str = os.getenv("WC_API_KEY", "")
    WC_API_SECRET: str = os.getenv("WC_API_SECRET", "")
    WC_HTTP_TIMEOUT: float = _get_float("WC_HTTP_TIMEOUT", 20.0)
    WC_VERIFY_SSL: bool = _get_bool("WC_VERIFY_SSL", False)

    # ── Polylang ─────────────────────────────────────────────────────────────
    # Comma-separated taxonomies with per-language terms, e.g. "pa_color, pa_size".
    # Empty means every global attribute taxonomy (pa_*).
    WPI_TRANSLATED_TAXONOMIES: list[str] = _get_list("WPI_TRANSLATED_TAXONOMIES")

    # ── Paths ────────────────────────────────────────────────────────────────
    WPI_SNAPSHOT_PATH: str = os.getenv("WPI_SNAPSHOT_PATH", "data/catalog_snapshot.json")

    # ── Logging ──────────────────────────────────────────────────────────────
    WPI_LOG_LEVEL: str = os.getenv("WPI_LOG_LEVEL", "INFO").upper()


settings = Settings()
