"""
PresetService - Gear preset catalog management.

Handles preset creation, renames, deletion and seeding of the default catalog.

Functional Core - pure business logic.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from regear.domain.entities import COMBAT_ROLES, GearPreset

from .catalog import DEFAULT_PRESETS
from .models import PresetValidationError
from .ports import PresetRepoPort

logger = logging.getLogger(__name__)

# --- Validation Functions ---


def validate_preset_data(
    role: str,
    name: str | None = None,
    gear: GearPreset | None = None,
) -> list[PresetValidationError]:
    """Validate preset data."""
    errors: list[PresetValidationError] = []

    if role not in COMBAT_ROLES:
        errors.append(
            PresetValidationError(
                code="role_invalid",
                message=f"Presets exist for {', '.join(COMBAT_ROLES)} only",
                field="role",
            )
        )

    if name is not None and not name.strip():
        errors.append(
            PresetValidationError(
                code="name_required",
                message="Preset name is required",
                field="name",
            )
        )

    if gear is not None and not gear.weapon.strip():
        errors.append(
            PresetValidationError(
                code="weapon_required",
                message="Preset weapon is required",
                field="weapon",
            )
        )

    return errors


def _not_found(role: str, name: str) -> PresetValidationError:
    return PresetValidationError(
        code="preset_not_found",
        message=f"No {role} preset named '{name}'",
        field="name",
    )


def _duplicate(role: str, name: str) -> PresetValidationError:
    return PresetValidationError(
        code="name_duplicate",
        message=f"A {role} preset named '{name}' already exists",
        field="name",
    )


# --- Preset Service ---


class PresetService:
    """
    Preset service.

    Manages the per-role catalog of full gear loadouts.
    """

    def __init__(self, repo: PresetRepoPort) -> None:
        """Initialize service."""
        self._repo = repo

    def list_by_role(self, role: str) -> dict[str, GearPreset]:
        """Presets for a role, by name. Unknown roles have none."""
        if role not in COMBAT_ROLES:
            return {}
        return dict(sorted(self._repo.list_by_role(role).items()))

    def get(self, role: str, name: str) -> GearPreset | None:
        return self.list_by_role(role).get(name)

    def create(
        self,
        role: str,
        name: str,
        gear: GearPreset,
    ) -> tuple[GearPreset | None, list[PresetValidationError]]:
        """
        Create a new preset.

        Returns:
            Tuple of (gear, errors). Gear is None if validation fails.
        """
        errors = validate_preset_data(role, name=name, gear=gear)
        if errors:
            return None, errors

        name = name.strip()
        if name in self.list_by_role(role):
            return None, [_duplicate(role, name)]

        saved = self._repo.save(role, name, gear)
        logger.info(f"Preset created: role={role}, name={name}")
        return saved, []

    def update(
        self,
        role: str,
        name: str,
        gear: GearPreset,
        new_name: str | None = None,
    ) -> tuple[GearPreset | None, list[PresetValidationError]]:
        """
        Replace a preset, renaming it when `new_name` differs.

        Returns:
            Tuple of (gear, errors). Gear is None if not found or validation fails.
        """
        errors = validate_preset_data(role, name=new_name, gear=gear)
        if errors:
            return None, errors

        existing = self.list_by_role(role)
        if name not in existing:
            return None, [_not_found(role, name)]

        target = new_name.strip() if new_name is not None else name
        if target != name:
            if target in existing:
                return None, [_duplicate(role, target)]
            saved = self._repo.rename(role, name, target, gear)
        else:
            saved = self._repo.save(role, target, gear)

        logger.info(f"Preset updated: role={role}, name={name}, saved_as={target}")
        return saved, []

    def delete(self, role: str, name: str) -> tuple[bool, list[PresetValidationError]]:
        """
        Delete a preset.

        Returns:
            Tuple of (success, errors).
        """
        if name not in self.list_by_role(role):
            return False, [_not_found(role, name)]

        self._repo.delete(role, name)
        logger.info(f"Preset deleted: role={role}, name={name}")
        return True, []

    def seed_defaults(
        self,
        catalog: Mapping[str, Mapping[str, GearPreset]] = DEFAULT_PRESETS,
    ) -> int:
        """Load the catalog for roles with no presets yet. Returns presets inserted."""
        inserted = 0
        for role, presets in catalog.items():
            if self.list_by_role(role):
                continue
            for name, gear in presets.items():
                self._repo.save(role, name, gear)
                inserted += 1
        logger.info(f"Seeded {inserted} default presets")
        return inserted
