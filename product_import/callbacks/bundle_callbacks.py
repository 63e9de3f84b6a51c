"""Callbacks for the bundle product attributes."""

from __future__ import annotations

from .base_callback import MappingCallback


class BundleTypeCallback(MappingCallback):
    """Used for bundle_price_type, bundle_sku_type and bundle_weight_type."""

    mappings = {
        "dynamic": 0,
        "fixed": 1,
    }


class BundlePriceViewCallback(MappingCallback):

    mappings = {
        "Price range": 0,
        "As low as": 1,
    }


class BundleShipmentTypeCallback(MappingCallback):

    mappings = {
        "together": 0,
        "separately": 1,
    }
