# config/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _env_int(name, default=None):
    val = os.getenv(name)
    if val is None or val.strip() == "":
        return default
    return int(val)


class Settings:
    # Runner defaults (mirroring the flags of the original csample.pl)
    DEFAULT_METHOD = os.getenv("CSAMPLE_METHOD", "sp")
    DEFAULT_BASIS = 0.0
    DEFAULT_OFFSET = 0
    DEFAULT_FORMAT = os.getenv("CSAMPLE_FORMAT", "txt")

    # Concordances are read and written as UTF-8; undecodable bytes (e.g.
    # Latin-1 corpora) pass through unchanged as surrogate escapes
    ENCODING = os.getenv("CSAMPLE_ENCODING", "utf-8")
    ENCODING_ERRORS = "surrogateescape"

    # Lines starting with this marker form the leading CWB header block
    HEADER_MARKER = os.getenv("CSAMPLE_HEADER_MARKER", "#")

    # Seed for the samplers' random generators. None draws a fresh OS seed,
    # set CSAMPLE_SEED in the environment (or .env) for reproducible runs.
    RANDOM_SEED = _env_int("CSAMPLE_SEED")

    LOG_LEVEL = os.getenv("CSAMPLE_LOG_LEVEL", "WARNING")

    # Per-method defaults applied when --basis is 0 or out of range
    METHOD_DEFAULTS = {
        "sp": {"basis": 2},
        "sf": {"basis": 50},
        "rp": {"basis": 0.5},
        "rf": {"basis": 50},
    }

    # Accepted values for --format; csv and tabular are synonyms
    OUTPUT_FORMATS = {
        "txt": "text",
        "text": "text",
        "csv": "tabular",
        "tabular": "tabular",
    }

settings = Settings()
