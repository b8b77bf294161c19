from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

_ENV_PREFIX = "ARGONBASE_"

MIN_TAG_LENGTH = 4
MAX_PARALLELISM = 0xFFFFFF


def _env_int(env: Mapping[str, str], name: str) -> Optional[int]:
    raw = env.get(_ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return None
    try:
        # base 0 accepts 0x.. and 0o.. prefixes
        return int(raw.strip(), 0)
    except ValueError as e:
        raise ValueError(f"{_ENV_PREFIX}{name} must be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class HashParams:
    """Argon2id cost parameters.

    memory_kib defaults to 4 MiB per lane (parallelism << 12) when left unset.
    """
    tag_length: int = 32
    iterations: int = 3
    parallelism: int = 1
    memory_kib: Optional[int] = None

    @property
    def effective_memory_kib(self) -> int:
        if self.memory_kib is None:
            return self.parallelism << 12
        return self.memory_kib

    def validate(self) -> None:
        if self.tag_length < MIN_TAG_LENGTH:
            raise ValueError(f"tag_length must be >= {MIN_TAG_LENGTH} bytes, got {self.tag_length}")
        if self.iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {self.iterations}")
        if not 1 <= self.parallelism <= MAX_PARALLELISM:
            raise ValueError(f"parallelism must be in 1..{MAX_PARALLELISM}, got {self.parallelism}")
        if self.effective_memory_kib < 8 * self.parallelism:
            raise ValueError(
                f"memory_kib must be >= 8 * parallelism ({8 * self.parallelism}), got {self.effective_memory_kib}"
            )

    def with_overrides(self, **kwargs: Optional[int]) -> "HashParams":
        return replace(self, **{k: v for k, v in kwargs.items() if v is not None})

    @staticmethod
    def from_env(env: Optional[Mapping[str, str]] = None) -> "HashParams":
        env = os.environ if env is None else env
        return HashParams().with_overrides(
            tag_length=_env_int(env, "TAG_LENGTH"),
            iterations=_env_int(env, "ITERATIONS"),
            parallelism=_env_int(env, "PARALLELISM"),
            memory_kib=_env_int(env, "MEMORY_KIB"),
        )


@dataclass(frozen=True)
class EncoderConfig:
    # header: prefix output with "Found N characters\n"
    # empty_on_zero: an all-zero digest renders as b"" instead of one zero symbol
    header: bool = False
    empty_on_zero: bool = False
