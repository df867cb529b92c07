from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class BinderConfig:
    # Metadata key holding the directive (Field(json_schema_extra=...) / field(metadata=...))
    tag: str = "bind"

    # pydantic strict mode; lax (weak) coercion when False
    strict: bool = False

    # Tolerate case differences between tree keys and destination field names
    case_insensitive: bool = True

    @classmethod
    def from_env(cls) -> "BinderConfig":
        """
        Env:
          STRUCTBIND_TAG=bind
          STRUCTBIND_STRICT=true/false
          STRUCTBIND_CASE_INSENSITIVE=true/false
        """
        tag = (os.getenv("STRUCTBIND_TAG") or "").strip() or cls.tag
        return cls(
            tag=tag,
            strict=_env_bool("STRUCTBIND_STRICT", cls.strict),
            case_insensitive=_env_bool("STRUCTBIND_CASE_INSENSITIVE", cls.case_insensitive),
        )


def _env_bool(key: str, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes")
