# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Closed catalog of modules, features and actions.

Composite modules (sales, production, ...) are gated per feature. Plain
modules (dashboard, inventory, ...) are gated as a whole and carry a single
implicit feature keyed ``MODULE_FEATURE``, so every matrix has the same
module -> feature -> action shape.
"""

from dataclasses import dataclass

from erp_access.models.enums import Action, UserRole

PermissionMatrix = dict[str, dict[str, dict[str, bool]]]

ACTIONS: tuple[str, ...] = tuple(action.value for action in Action)

MODULE_FEATURE = "module"


@dataclass(frozen=True)
class FeatureDescriptor:
    """A capability inside a module."""

    key: str
    label: str


@dataclass(frozen=True)
class ModuleDescriptor:
    """A top-level business area.

    ``roles`` lists the roles the module is presented to; ``None`` means
    every role. Super roles see every module regardless.
    """

    name: str
    label: str
    features: tuple[FeatureDescriptor, ...]
    roles: frozenset[UserRole] | None = None

    @property
    def feature_granular(self) -> bool:
        return not (
            len(self.features) == 1 and self.features[0].key == MODULE_FEATURE
        )

    @property
    def feature_keys(self) -> tuple[str, ...]:
        return tuple(feature.key for feature in self.features)


def _plain(name: str, label: str, *roles: UserRole) -> ModuleDescriptor:
    return ModuleDescriptor(
        name=name,
        label=label,
        features=(FeatureDescriptor(MODULE_FEATURE, label),),
        roles=frozenset(roles) if roles else None,
    )


def _composite(
    name: str,
    label: str,
    features: list[tuple[str, str]],
    *roles: UserRole,
) -> ModuleDescriptor:
    return ModuleDescriptor(
        name=name,
        label=label,
        features=tuple(FeatureDescriptor(key, text) for key, text in features),
        roles=frozenset(roles) if roles else None,
    )


MODULE_CATALOG: tuple[ModuleDescriptor, ...] = (
    _plain("dashboard", "Dashboard"),
    _plain("orders", "Orders", UserRole.UNIT_HEAD),
    _composite(
        "sales",
        "Sales",
        [
            ("salesDashboard", "Sales Dashboard"),
            ("orders", "My Orders"),
            ("myIndent", "My Indent"),
            ("myCustomers", "My Customers"),
            ("myDeliveries", "My Dispatches"),
            ("myInvoices", "My Payments"),
            ("refundReturn", "Return/Damage"),
        ],
        UserRole.UNIT_HEAD,
        UserRole.SALES,
        UserRole.ACCOUNTS,
    ),
    _composite(
        "unitManager",
        "Sales Approval",
        [
            ("salesApproval", "Sales Approval"),
            ("salesOrderList", "Sales Order List"),
            ("productionGroup", "Production Group"),
        ],
        UserRole.UNIT_MANAGER,
    ),
    _composite(
        "production",
        "Production",
        [
            ("todaysIndents", "Today's Indents"),
            ("summaryPanel", "Summary Panel"),
            ("submitProductionData", "Submit Production Data"),
            ("submissionHistory", "Submission History"),
            ("productionGroup", "Production Group"),
            ("productionShift", "Production Shift"),
        ],
        UserRole.UNIT_HEAD,
        UserRole.PRODUCTION,
    ),
    _plain(
        "manufacturing",
        "Manufacturing",
        UserRole.UNIT_HEAD,
        UserRole.UNIT_MANAGER,
        UserRole.PRODUCTION,
        UserRole.PACKING,
    ),
    _composite(
        "packing",
        "Packing",
        [
            ("packingSheet", "Packing Sheet"),
            ("packingHistory", "Packing History"),
        ],
        UserRole.UNIT_HEAD,
        UserRole.PACKING,
    ),
    _composite(
        "dispatch",
        "Dispatches",
        [
            ("allDispatches", "All Dispatches"),
            ("createDispatch", "Create Dispatch"),
            ("dispatchNotes", "Dispatch Notes"),
            ("proofOfDelivery", "Proof of Delivery"),
            ("trackingInfo", "Tracking Info"),
        ],
        UserRole.UNIT_HEAD,
        UserRole.UNIT_MANAGER,
        UserRole.PACKING,
        UserRole.DISPATCH,
    ),
    _composite(
        "accounts",
        "Accounts",
        [
            ("paymentRegister", "Payment Register"),
            ("creditNotes", "Credit Notes"),
            ("ledgerReport", "Ledger Report"),
        ],
        UserRole.UNIT_HEAD,
        UserRole.ACCOUNTS,
    ),
    _plain(
        "inventory",
        "Inventory",
        UserRole.UNIT_HEAD,
        UserRole.UNIT_MANAGER,
        UserRole.SALES,
        UserRole.PRODUCTION,
    ),
    _plain("customers", "Customers", UserRole.UNIT_HEAD, UserRole.SALES),
    _plain("suppliers", "Suppliers", UserRole.UNIT_HEAD),
    _plain("purchases", "Purchases", UserRole.UNIT_HEAD),
    _composite(
        "settings",
        "Settings",
        [
            ("general", "General Settings"),
            ("users", "User Management"),
            ("system", "System Configuration"),
        ],
        UserRole.UNIT_HEAD,
    ),
)

_MODULES_BY_NAME: dict[str, ModuleDescriptor] = {
    module.name: module for module in MODULE_CATALOG
}


def get_module(name: str) -> ModuleDescriptor | None:
    """Look up a module descriptor by name."""
    return _MODULES_BY_NAME.get(name)


def is_known_feature(module: str, feature: str) -> bool:
    descriptor = get_module(module)
    return descriptor is not None and feature in descriptor.feature_keys


def empty_matrix() -> PermissionMatrix:
    """Build a complete matrix with every flag set to False."""
    return {
        module.name: {
            key: {action: False for action in ACTIONS} for key in module.feature_keys
        }
        for module in MODULE_CATALOG
    }
