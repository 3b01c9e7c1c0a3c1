"""Package records reconciled between generated and locally supplied BOMs.

Identity (group, name, version) is fixed at construction; license and copyright
data is mutable because both the copyright resolver and the reconciler write to
it. The copyright field follows a first-wins rule for extraction
(``resolve_copyright``) while explicit overrides from local data go through
``apply_override``.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class PackageIdentity:
    group: str | None
    name: str
    version: str

    def __str__(self) -> str:
        if self.group:
            return f"{self.group}/{self.name}@{self.version}"
        return f"{self.name}@{self.version}"


@dataclass(slots=True, frozen=True)
class LicenseDescriptor:
    """One license entry as listed on a component.

    Either an SPDX id and/or free-text name, or a compound SPDX ``expression``.
    """

    id: str | None = None
    name: str | None = None
    url: str | None = None
    expression: str | None = None

    @property
    def label(self) -> str:
        return self.id or self.name or self.expression or ""


@dataclass(slots=True, eq=False)
class PackageRecord:
    identity: PackageIdentity
    licenses: list[LicenseDescriptor] = field(default_factory=list["LicenseDescriptor"])
    copyright: str = ""
    external_references: list[str] = field(default_factory=list[str])
    raw_license_texts: list[str] = field(default_factory=list[str])
    readme_text: str = ""
    bom_index: int | None = None

    @classmethod
    def create(
        cls,
        *,
        name: str,
        version: str,
        group: str | None = None,
        licenses: list[LicenseDescriptor] | None = None,
        copyright: str = "",  # noqa: A002
        external_references: list[str] | None = None,
        bom_index: int | None = None,
    ) -> PackageRecord:
        return cls(
            identity=PackageIdentity(group=group, name=name, version=version),
            licenses=list(licenses or ()),
            copyright=copyright,
            external_references=list(external_references or ()),
            bom_index=bom_index,
        )

    @property
    def group(self) -> str | None:
        return self.identity.group

    @property
    def name(self) -> str:
        return self.identity.name

    @property
    def version(self) -> str:
        return self.identity.version

    @property
    def has_licenses(self) -> bool:
        return bool(self.licenses)

    @property
    def has_external_references(self) -> bool:
        return bool(self.external_references)

    def resolve_copyright(self, value: str) -> bool:
        """Set the copyright once; later values never replace a resolved notice."""

        if self.copyright or not value:
            return False
        self.copyright = value
        return True

    def apply_override(self, other: PackageRecord) -> None:
        self.licenses = list(other.licenses)
        self.copyright = other.copyright

    def __str__(self) -> str:
        return str(self.identity)
