"""Registry of the frameworks and variants that can be scaffolded."""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "FRAMEWORKS",
    "Framework",
    "SWC_MARKER",
    "TARGET_DIR_TOKEN",
    "Variant",
    "all_template_ids",
    "find_framework",
    "find_variant",
    "split_swc",
]


TARGET_DIR_TOKEN = "TARGET_DIR"
SWC_MARKER = "-swc"


class Variant(BaseModel):
    """A concrete template choice inside a framework."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Globally unique template identifier.")
    display: str = Field(..., description="Label shown in the variant prompt.")
    color: str = Field(default="default", description="Rich style used to render the label.")
    custom_command: Optional[str] = Field(
        None,
        description="Generic command delegated to an external generator, if any.",
    )

    @property
    def is_delegated(self) -> bool:
        return self.custom_command is not None


class Framework(BaseModel):
    """A framework grouping one or more variants."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Identifier of the framework.")
    display: str = Field(..., description="Label shown in the framework prompt.")
    color: str = Field(default="default", description="Rich style used to render the label.")
    variants: Tuple[Variant, ...] = Field(default_factory=tuple, description="Variants in display order.")


FRAMEWORKS: Tuple[Framework, ...] = (
    Framework(
        name="vue",
        display="Vue",
        color="green",
        variants=(
            Variant(name="vue-ts", display="TypeScript", color="blue"),
            Variant(name="vue", display="JavaScript", color="yellow"),
            Variant(
                name="custom-create-vue",
                display="Customize with create-vue ↗",
                color="green",
                custom_command=f"npm create vue@latest {TARGET_DIR_TOKEN}",
            ),
            Variant(
                name="custom-nuxt",
                display="Nuxt ↗",
                color="bright_green",
                custom_command=f"npm exec nuxi init {TARGET_DIR_TOKEN}",
            ),
        ),
    ),
    Framework(
        name="react",
        display="React",
        color="cyan",
        variants=(
            Variant(name="react-ts", display="TypeScript", color="blue"),
            Variant(name="react-swc-ts", display="TypeScript + SWC", color="red"),
            Variant(name="react", display="JavaScript", color="bright_blue"),
            Variant(name="react-swc", display="JavaScript + SWC", color="bright_green"),
            Variant(
                name="custom-remix",
                display="Remix ↗",
                color="cyan",
                custom_command=f"npm create remix@latest {TARGET_DIR_TOKEN}",
            ),
        ),
    ),
    Framework(
        name="monorepo",
        display="Monorepo",
        color="bright_blue",
        variants=(Variant(name="monorepo", display="TypeScript", color="bright_red"),),
    ),
    Framework(
        name="others",
        display="Others",
        color="default",
        variants=(
            Variant(
                name="create-vite-extra",
                display="create-vite-extra ↗",
                custom_command=f"npm create vite-extra@latest {TARGET_DIR_TOKEN}",
            ),
            Variant(
                name="create-electron-vite",
                display="create-electron-vite ↗",
                custom_command=f"npm create electron-vite@latest {TARGET_DIR_TOKEN}",
            ),
        ),
    ),
)


def _index_variants(frameworks: Tuple[Framework, ...]) -> dict[str, Variant]:
    index: dict[str, Variant] = {}
    for framework in frameworks:
        for variant in framework.variants:
            if variant.name in index:
                raise ValueError(f"duplicate template id '{variant.name}'")
            index[variant.name] = variant
    return index


_VARIANTS = _index_variants(FRAMEWORKS)


def all_template_ids() -> frozenset[str]:
    """Return every template id that may be passed on the command line."""

    return frozenset(_VARIANTS)


def find_variant(name: str) -> Variant | None:
    return _VARIANTS.get(name)


def find_framework(name: str) -> Framework | None:
    for framework in FRAMEWORKS:
        if framework.name == name:
            return framework
    return None


def split_swc(name: str) -> tuple[str, bool]:
    """Strip the first ``-swc`` marker from ``name``.

    ``react-swc-ts`` shares its files with ``react-ts``; the flag tells the
    scaffolder to patch in the SWC plugin afterwards.
    """

    if SWC_MARKER not in name:
        return name, False
    return name.replace(SWC_MARKER, "", 1), True
