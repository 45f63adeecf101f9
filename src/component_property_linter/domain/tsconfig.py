from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class TsConfig:
    """
    Compiler configuration read once per run.

    ``compiler_options`` is the merged ``compilerOptions`` table after the
    ``extends`` chain has been applied; ``paths`` holds the path aliases.
    """
    path: Optional[str]
    compiler_options: dict[str, object] = field(default_factory=dict)
    paths: dict[str, tuple[str, ...]] = field(default_factory=dict)

    @property
    def exists(self) -> bool:
        """True if a tsconfig file was found."""
        return self.path is not None

    def option_enabled(self, name: str, strict_family: bool = False) -> bool:
        """
        Effective boolean compiler option.

        Options in the ``strict`` family (e.g. ``noImplicitAny``) inherit
        ``strict`` unless set explicitly.
        """
        value = self.compiler_options.get(name)
        if isinstance(value, bool):
            return value
        if strict_family:
            return bool(self.compiler_options.get("strict", False))
        return False
