"""
Resolution of the attribute code => callback ids mapping of an import run.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from product_import.models.enums import MemberNames

logger = logging.getLogger(__name__)

CallbackMappingsView = Mapping[str, Tuple[str, ...]]

# callbacks of the standard catalog attributes
DEFAULT_CALLBACK_MAPPINGS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "visibility": ("visibility",),
    "tax_class_id": ("tax_class",),
    "bundle_price_type": ("bundle_type",),
    "bundle_sku_type": ("bundle_type",),
    "bundle_weight_type": ("bundle_type",),
    "bundle_price_view": ("bundle_price_view",),
    "bundle_shipment_type": ("bundle_shipment_type",),
})

# callbacks of the user defined attributes, by the attribute's frontend input type
DEFAULT_FRONTEND_INPUT_CALLBACK_MAPPINGS: Mapping[str, str] = MappingProxyType({
    "select": "select",
    "multiselect": "multiselect",
    "boolean": "boolean",
})


def resolve_callback_mappings(
    user_defined_attributes: Iterable[Mapping[str, object]],
    configured_mappings: Sequence[Mapping[str, Sequence[str]]],
    default_mappings: Optional[Mapping[str, Sequence[str]]] = None,
    frontend_input_mappings: Optional[Mapping[str, str]] = None,
) -> CallbackMappingsView:
    """
    Merges the three sources of callback mappings, later ones winning.

    1. the callbacks of the standard attributes
    2. the callback for the frontend input type of every user defined
       attribute, appended to the attribute's list
    3. the configured mappings, each replacing the attribute's whole list

    Args:
        user_defined_attributes: EAV attributes with attribute_code and frontend_input
        configured_mappings: layers of attribute code => callback ids from the configuration
        default_mappings: replaces DEFAULT_CALLBACK_MAPPINGS
        frontend_input_mappings: replaces DEFAULT_FRONTEND_INPUT_CALLBACK_MAPPINGS

    Returns:
        Read only mapping of attribute code => tuple of callback ids, in execution order
    """
    if default_mappings is None:
        default_mappings = DEFAULT_CALLBACK_MAPPINGS
    if frontend_input_mappings is None:
        frontend_input_mappings = DEFAULT_FRONTEND_INPUT_CALLBACK_MAPPINGS

    mappings: Dict[str, List[str]] = {
        attribute_code: list(callback_ids) for attribute_code, callback_ids in default_mappings.items()
    }

    for eav_attribute in user_defined_attributes:
        attribute_code = eav_attribute[MemberNames.ATTRIBUTE_CODE]
        frontend_input = eav_attribute.get(MemberNames.FRONTEND_INPUT)

        callback_ids = mappings.setdefault(attribute_code, [])
        if frontend_input in frontend_input_mappings:
            callback_ids.append(frontend_input_mappings[frontend_input])

    for layer in configured_mappings:
        for attribute_code, callback_ids in layer.items():
            if attribute_code in mappings:
                logger.info(
                    "Now override callback mappings for attribute %s with values found in configuration file",
                    attribute_code,
                )
            mappings[attribute_code] = list(callback_ids)

    return MappingProxyType({
        attribute_code: tuple(callback_ids) for attribute_code, callback_ids in mappings.items()
    })
