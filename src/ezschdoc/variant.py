from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping

from .errors import Diagnostic
from .objects import Component, Designator, Parameter

if TYPE_CHECKING:
    from .document import Document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VariantResult:
    not_fitted: list[str]
    changed_parameters: int
    missing_designators: list[str]


def apply_variant(doc: "Document", overlay: Mapping[str, Mapping[str, str]]) -> VariantResult:
    """Apply a variant in place; an empty override mapping marks the part not fitted."""
    designators = [obj for obj in doc.objects if isinstance(obj, Designator)]
    not_fitted: list[str] = []
    missing: list[str] = []
    changed = 0

    for designator_text, overrides in overlay.items():
        match = next((obj for obj in designators if obj.text == designator_text), None)
        if match is None:
            logger.debug("variant designator %s not in document", designator_text)
            doc.diagnostics.append(
                Diagnostic("variant-designator-missing", f"designator {designator_text!r} not found")
            )
            missing.append(designator_text)
            continue
        component = doc.parent(match)
        if not isinstance(component, Component):
            message = f"designator {designator_text!r} is not owned by a component"
            logger.warning(message)
            doc.diagnostics.append(Diagnostic("variant-designator-orphan", message, match.index))
            missing.append(designator_text)
            continue
        if not overrides:
            component.dnp = True
            not_fitted.append(designator_text)
            continue
        for child in doc.children(component):
            if not isinstance(child, Parameter):
                continue
            new_text = overrides.get(child.name)
            if new_text is None:
                continue
            child.text = new_text
            child.changed = True
            changed += 1

    return VariantResult(not_fitted=not_fitted, changed_parameters=changed, missing_designators=missing)
