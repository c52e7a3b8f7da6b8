"""
option_decoder.decode

Parsing of the raw option-code string returned by the vehicle API, plus loading of the
bundled option catalog.

The raw string is a comma separated list of short tokens such as
``"MS01,RENA,TM00,DRLH,PF00,BT85,PBCW,RFPO,WT19,IBMB,IDPB,TR00,SU01,SC01,X001,X003"``.
The first two characters of a token name its category and the rest selects a variant.
Tokens starting with ``X0`` are an older flat namespace where the whole token is a flag.

Functions:
    - preprocess_options: Apply the historical text corrections to a raw string
    - parse_options: Build an OptionIndex from a raw string (total, never raises)
    - load_option_catalog: Load code descriptions from the bundled YAML catalog
    - describe_options: Describe each token of a raw string

Notes:
    - Tokens shorter than two characters after stripping are skipped and kept in
      OptionIndex.malformed.
"""

import logging
import os
from importlib import resources
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

import yaml

from .enums import CATEGORY_ENUMS

logger = logging.getLogger(__name__)

# Prefix of the legacy flat-flag namespace.
LEGACY_FLAG_PREFIX = "X0"

# Applied in order to the whole raw string before it is split.
# The backend used a three letter prefix "PBT" for the battery category, which
# otherwise follows the two letter convention.
LEGACY_SUBSTITUTIONS: Tuple[Tuple[str, str], ...] = (("PBT", "BT"),)


def _default_catalog_path() -> str:
    """
    Path of the option catalog bundled as package data.
    """
    return str(resources.files(__package__) / "config" / "option_codes.yml")


class OptionIndex:
    """
    Immutable lookup structure built from one raw option string.

    Attributes:
        prefixed: read-only mapping of two character prefix -> full token
        flags: full legacy ``X0..`` codes present in the string
        tokens: accepted tokens, in input order
        malformed: tokens skipped because they were too short to carry a prefix
    """

    __slots__ = ("prefixed", "flags", "tokens", "malformed")

    def __init__(
        self,
        prefixed: Optional[Mapping[str, str]] = None,
        flags: Optional[frozenset] = None,
        tokens: Tuple[str, ...] = (),
        malformed: Tuple[str, ...] = (),
    ):
        object.__setattr__(self, "prefixed", MappingProxyType(dict(prefixed or {})))
        object.__setattr__(self, "flags", frozenset(flags or ()))
        object.__setattr__(self, "tokens", tuple(tokens))
        object.__setattr__(self, "malformed", tuple(malformed))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def get(self, key: str) -> Optional[str]:
        """Return the token stored under a prefix or a full legacy code, else None."""
        token = self.prefixed.get(key)
        if token is None and key in self.flags:
            return key
        return token

    def first_option(self, *prefixes: str) -> Optional[str]:
        """
        Probe ``prefixes`` in order and return the token found at the first one present.

        Some categories moved between prefixes across model years (paint color lives
        under PB, PM or PP), so callers pass every prefix the category has used.
        """
        for prefix in prefixes:
            token = self.get(prefix)
            if token is not None:
                return token
        return None

    def has_option(self, name: str) -> bool:
        """
        True if the option ``name`` is present and enabled.

        ``X`` options are either there or not. Every other option is stored as a prefix
        followed by a variant, and only the variant ``01`` means enabled.
        """
        token = self.get(name)
        if token is None:
            return False
        if name.startswith("X"):
            return True
        return token == name + "01"

    def __contains__(self, key) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self.prefixed) + len(self.flags)

    def __eq__(self, other) -> bool:
        if not isinstance(other, OptionIndex):
            return NotImplemented
        return self.prefixed == other.prefixed and self.flags == other.flags

    def __hash__(self):
        return hash((frozenset(self.prefixed.items()), self.flags))

    def __repr__(self) -> str:
        return f"OptionIndex(tokens={list(self.tokens)!r})"


def preprocess_options(raw: str) -> str:
    """
    Apply LEGACY_SUBSTITUTIONS, in order, to the whole raw string.
    """
    for old, new in LEGACY_SUBSTITUTIONS:
        raw = raw.replace(old, new)
    return raw


def parse_options(raw: Optional[str]) -> OptionIndex:
    """
    Build an OptionIndex from a raw option-code string.

    A None string gives an empty index. Later tokens overwrite earlier ones with the
    same key.
    """
    if raw is None:
        return OptionIndex()

    prefixed: Dict[str, str] = {}
    flags = set()
    tokens: List[str] = []
    malformed: List[str] = []

    for token in preprocess_options(raw).split(","):
        token = token.strip()
        if len(token) < 2:
            logger.debug(f"Skipping malformed option token {token!r}")
            malformed.append(token)
            continue
        tokens.append(token)
        prefix = token[:2]
        if prefix == LEGACY_FLAG_PREFIX:
            flags.add(token)
        else:
            prefixed[prefix] = token

    return OptionIndex(prefixed, frozenset(flags), tuple(tokens), tuple(malformed))


def load_option_catalog(catalog_path_override: str | None = None) -> dict[str, str]:
    """
    Load the option catalog and flatten it into ``code -> description``.

    The YAML file maps category names to ``{code: description}`` tables. If the
    override path is missing or unreadable the bundled catalog is used.

    Args:
        catalog_path_override (str | None): Optional path to a catalog YAML file.

    Returns:
        dict[str, str]: description for every code in the catalog
    """
    catalog_path = _default_catalog_path()
    if catalog_path_override:
        if os.path.exists(catalog_path_override) and os.access(catalog_path_override, os.R_OK):
            logger.info(f"Using option catalog override: {catalog_path_override}")
            catalog_path = catalog_path_override
        else:
            logger.warning(
                f"Option catalog override path provided but not found/readable: "
                f"{catalog_path_override}. Using default: {catalog_path}"
            )

    if not os.path.exists(catalog_path):
        logger.error(f"Option catalog NOT FOUND: {catalog_path}")
        return {}

    with open(catalog_path) as f:
        raw_catalog = yaml.safe_load(f) or {}

    catalog: dict[str, str] = {}
    for category, entries in raw_catalog.items():
        if not isinstance(entries, dict):
            logger.warning(f"Ignoring catalog category '{category}': expected a mapping")
            continue
        for code, description in entries.items():
            catalog[str(code)] = str(description)
    logger.info(f"Loaded {len(catalog)} option descriptions from {catalog_path}")
    return catalog


def _enum_description(token: str) -> Optional[str]:
    for enum_cls in CATEGORY_ENUMS:
        if token in enum_cls.known_codes():
            return enum_cls.describe(token)
    return None


def describe_options(
    raw: Optional[str], catalog: Mapping[str, str]
) -> list[tuple[str, str | None]]:
    """
    Describe every accepted token of ``raw``.

    The catalog wins over the typed enumerations; tokens neither knows get None.
    """
    described = []
    for token in parse_options(raw).tokens:
        description = catalog.get(token)
        if description is None:
            description = _enum_description(token)
        described.append((token, description))
    return described
