"""Seed catalog for the fencebom calculation engine.

Materials, labor codes and rates are a representative slice of a
residential fence contractor's catalog: wood vertical (picket), wood
horizontal and ornamental iron product types with their common styles.
Costs are 2025 supplier prices; labor rates are company-wide with a few
business-unit overrides.
"""

from fencebom.models.catalog import (
    ComponentRole,
    EligibilityRule,
    FormulaParameter,
    LaborCode,
    LaborRate,
    Material,
    ProductStyle,
    ProductType,
    ProductTypeComponent,
)
from fencebom.models.configuration import Configuration
from fencebom.models.enums import (
    LaborBasis,
    PostType,
    ProductFamily,
    RuleKind,
    SelectionMode,
    UnitType,
)

WOOD_VERTICAL = "wood-vertical"
WOOD_HORIZONTAL = "wood-horizontal"
IRON = "iron"

_UP_TO_SIX_FT = ["3", "4", "5", "6"]
_OVER_SIX_FT = ["7", "8"]

SEED_ROLES: list[ComponentRole] = [
    # --- Materials ---
    ComponentRole(code="post", name="Post"),
    ComponentRole(code="picket", name="Picket"),
    ComponentRole(code="rail", name="Rail"),
    ComponentRole(code="cap", name="Cap"),
    ComponentRole(code="trim", name="Trim"),
    ComponentRole(code="rot_board", name="Rot Board"),
    ComponentRole(code="bracket", name="Bracket"),
    ComponentRole(code="steel_post_cap", name="Steel Post Cap"),
    ComponentRole(code="nails_picket", name="Picket Nails", unit_type=UnitType.COIL),
    ComponentRole(code="concrete", name="Concrete", unit_type=UnitType.BAG),
    ComponentRole(code="concrete_sand", name="Sand & Gravel Mix", unit_type=UnitType.BAG),
    ComponentRole(code="concrete_cement", name="Portland Cement", unit_type=UnitType.BAG),
    ComponentRole(code="concrete_quickrock", name="QuickRock", unit_type=UnitType.BAG),
    ComponentRole(code="board", name="Horizontal Board"),
    ComponentRole(code="nailer", name="Nailer"),
    ComponentRole(
        code="vertical_trim", name="Vertical Trim", unit_type=UnitType.LINEAR_FOOT
    ),
    ComponentRole(code="panel", name="Iron Panel"),
    # --- Labor ---
    ComponentRole(
        code="set_posts",
        name="Set Posts",
        unit_type=UnitType.LINEAR_FOOT,
        is_labor=True,
        labor_basis=LaborBasis.NET_LENGTH,
    ),
    ComponentRole(
        code="install",
        name="Install",
        unit_type=UnitType.LINEAR_FOOT,
        is_labor=True,
        labor_basis=LaborBasis.NET_LENGTH,
    ),
    ComponentRole(
        code="style_labor",
        name="Style Labor",
        unit_type=UnitType.LINEAR_FOOT,
        is_labor=True,
        labor_basis=LaborBasis.NET_LENGTH,
    ),
    ComponentRole(
        code="cap_trim_labor",
        name="Cap and Trim Labor",
        unit_type=UnitType.LINEAR_FOOT,
        is_labor=True,
        labor_basis=LaborBasis.NET_LENGTH,
    ),
    ComponentRole(
        code="gate_labor",
        name="Gate Installation",
        unit_type=UnitType.EACH,
        is_labor=True,
        labor_basis=LaborBasis.GATES,
    ),
]


# Premixed bags or the three-part sand, cement and quickrock mix.
_CONCRETE_MIX = ["concrete", "concrete_sand", "concrete_cement", "concrete_quickrock"]


def _components(required: list[str], optional: list[str]) -> list[ProductTypeComponent]:
    return [ProductTypeComponent(role_code=code, is_required=True) for code in required] + [
        ProductTypeComponent(role_code=code) for code in optional
    ]


SEED_PRODUCT_TYPES: list[ProductType] = [
    ProductType(
        code=WOOD_VERTICAL,
        name="Wood Vertical",
        family=ProductFamily.WOOD_VERTICAL,
        default_post_spacing=8.0,
        components=_components(
            ["post", "picket", "rail", "set_posts", "install"],
            [
                "cap",
                "trim",
                "rot_board",
                "bracket",
                "steel_post_cap",
                "nails_picket",
                *_CONCRETE_MIX,
                "style_labor",
                "cap_trim_labor",
                "gate_labor",
            ],
        ),
    ),
    ProductType(
        code=WOOD_HORIZONTAL,
        name="Wood Horizontal",
        family=ProductFamily.WOOD_HORIZONTAL,
        default_post_spacing=6.0,
        components=_components(
            ["post", "board", "set_posts", "install"],
            [
                "nailer",
                "cap",
                "vertical_trim",
                "steel_post_cap",
                *_CONCRETE_MIX,
                "gate_labor",
            ],
        ),
    ),
    ProductType(
        code=IRON,
        name="Iron",
        family=ProductFamily.IRON,
        default_post_spacing=8.0,
        components=_components(
            ["post", "panel", "set_posts", "install"],
            ["bracket", "steel_post_cap", *_CONCRETE_MIX, "gate_labor"],
        ),
    ),
]

SEED_STYLES: list[ProductStyle] = [
    ProductStyle(code="standard", name="Standard", product_type_code=WOOD_VERTICAL),
    ProductStyle(
        code="good-neighbor",
        name="Good Neighbor",
        product_type_code=WOOD_VERTICAL,
        formula_adjustments={"style_multiplier": 1.11},
    ),
    # Overlapping pickets: 2w / (2w - 2.5) for a 5.5" picket
    ProductStyle(
        code="board-on-board",
        name="Board on Board",
        product_type_code=WOOD_VERTICAL,
        formula_adjustments={"style_multiplier": 1.294},
    ),
    ProductStyle(code="standard", name="Standard", product_type_code=WOOD_HORIZONTAL),
    ProductStyle(code="good-neighbor", name="Good Neighbor", product_type_code=WOOD_HORIZONTAL),
    ProductStyle(code="standard-2-rail", name="Standard 2 Rail", product_type_code=IRON),
    ProductStyle(code="ameristar", name="Ameristar", product_type_code=IRON),
    ProductStyle(code="iron-rail", name="Iron Rail", product_type_code=IRON),
]

SEED_MATERIALS: list[Material] = [
    # --- 01-Post ---
    Material(
        id="mat-PS13", sku="PS13", name="4x4 Wood Post - PTP - 8FT",
        category="01-Post", subcategory="Wood 4x4", unit_cost=7.85, length_ft=8,
    ),
    Material(
        id="mat-PS12", sku="PS12", name="4x4 Wood Post - PTP - 10FT",
        category="01-Post", subcategory="Wood 4x4", unit_cost=11.55, length_ft=10,
    ),
    Material(
        id="mat-PS04", sku="PS04", name="D2-3/8 Steel Post - Galv - 8FT",
        category="01-Post", subcategory="Steel Post", unit_cost=10.63, length_ft=8,
    ),
    Material(
        id="mat-PS10", sku="PS10", name="2x2x8 Post - Black",
        category="01-Post", subcategory="Iron Squared Post", unit_cost=18.43, length_ft=8,
    ),
    # --- 02-Pickets ---
    Material(
        id="mat-P601", sku="P601", name="1x6x6 Sierra Placer",
        category="02-Pickets", subcategory="02-02 1x6 Pickets", unit_cost=2.09,
        actual_width=5.5, length_ft=6,
    ),
    Material(
        id="mat-P603", sku="P603", name="1X6X6 WRC",
        category="02-Pickets", subcategory="02-02 1x6 Pickets", unit_cost=3.88,
        actual_width=5.5, length_ft=6,
    ),
    Material(
        id="mat-P804", sku="P804", name="1X6X8 Sierra Placer",
        category="02-Pickets", subcategory="02-02 1x6 Pickets", unit_cost=2.31,
        actual_width=5.5, length_ft=8,
    ),
    Material(
        id="mat-P401", sku="P401", name="1x4x6 Sierra Placer",
        category="02-Pickets", subcategory="02-01 1x4 Pickets", unit_cost=2.01,
        actual_width=3.5, length_ft=6,
    ),
    # --- 03-Rails ---
    Material(
        id="mat-RA01", sku="RA01", name="2x4x8 Rail - SPF",
        category="03-Rails", subcategory="2x4 Rails", unit_cost=3.40, length_ft=8,
    ),
    Material(
        id="mat-RA02", sku="RA02", name="2x4x8 Rail - PTP",
        category="03-Rails", subcategory="2x4 Rails", unit_cost=3.44, length_ft=8,
    ),
    # --- 04-Caps, Trims & Nailers ---
    Material(
        id="mat-CTN09", sku="CTN09", name="2x6x10 SPF",
        category="04-Caps, Trims & Nailers", subcategory="Cap", unit_cost=7.85, length_ft=10,
    ),
    Material(
        id="mat-CTN02", sku="CTN02", name="2x6x12 Rough Cedar",
        category="04-Caps, Trims & Nailers", subcategory="Cap", unit_cost=15.91, length_ft=12,
    ),
    Material(
        id="mat-CTN07", sku="CTN07", name="1x4x8 Cedar - Flat",
        category="04-Caps, Trims & Nailers", subcategory="Trim", unit_cost=4.55, length_ft=8,
    ),
    Material(
        id="mat-CTN05", sku="CTN05", name="1x2x10 Trim",
        category="04-Caps, Trims & Nailers", subcategory="Trim", unit_cost=3.21, length_ft=10,
    ),
    Material(
        id="mat-CTN04", sku="CTN04", name="2x2x8 Nailer - PTP",
        category="04-Caps, Trims & Nailers", subcategory="Nailer", unit_cost=2.87, length_ft=8,
    ),
    Material(
        id="mat-CTN11", sku="CTN11", name="1x2 Trim - Cedar (per LF)",
        category="04-Caps, Trims & Nailers", subcategory="Vertical Trim", unit_cost=0.38,
        unit_type=UnitType.LINEAR_FOOT, bundle_size=10,
    ),
    Material(
        id="mat-RB01", sku="RB01", name="2x6x8 Rot Board - PTP",
        category="04-Caps, Trims & Nailers", subcategory="Rot Board", unit_cost=6.12,
        length_ft=8,
    ),
    # --- 05-Iron Panels ---
    Material(
        id="mat-IP05", sku="IP05", name="4x8 2R FF Panel - Black",
        category="05-Iron Panels", subcategory="2 Rail F/F", unit_cost=47.76, length_ft=8,
    ),
    Material(
        id="mat-IP10", sku="IP10", name="6x8 2R FF Panel - Black",
        category="05-Iron Panels", subcategory="2 Rail F/F", unit_cost=81.00, length_ft=8,
    ),
    Material(
        id="mat-NS04", sku="NS04", name="Ameristar 6x8 3R FP Panel - Rackable",
        category="05-Iron Panels", subcategory="Ameristar", unit_cost=96.40, length_ft=8,
    ),
    # --- 06-Concrete ---
    Material(
        id="mat-CTR", sku="CTR", name="Red Bag Concrete (50lb)",
        category="06-Concrete", subcategory="Fast-Setting Concrete Bag", unit_cost=7.44,
        unit_type=UnitType.BAG, per_post=1.0,
    ),
    Material(
        id="mat-CTY", sku="CTY", name="Yellow Bag Concrete (80lb)",
        category="06-Concrete", subcategory="Standard Concrete Bag", unit_cost=5.63,
        unit_type=UnitType.BAG, per_post=0.65,
    ),
    Material(
        id="mat-CTS", sku="CTS", name="Concrete Sand & Gravel Mix 50lb",
        category="06-Concrete", subcategory="3-Part", unit_cost=4.25,
        unit_type=UnitType.BAG, per_post=0.1,
    ),
    Material(
        id="mat-CTP", sku="CTP", name="Portland Cement 94lb",
        category="06-Concrete", subcategory="3-Part", unit_cost=12.75,
        unit_type=UnitType.BAG, per_post=0.05,
    ),
    Material(
        id="mat-CTQ", sku="CTQ", name="QuickRock 50lb",
        category="06-Concrete", subcategory="3-Part", unit_cost=5.50,
        unit_type=UnitType.BAG, per_post=0.5,
    ),
    # --- 08-Hardware ---
    Material(
        id="mat-HW06", sku="HW06", name="D2-3/8 Bracket - Galvanized",
        category="08-Hardware", subcategory="Brackets", unit_cost=0.86,
    ),
    Material(
        id="mat-IB01", sku="IB01", name="Ameristar Rail Bracket",
        category="08-Hardware", subcategory="Iron Brackets", unit_cost=2.75,
    ),
    Material(
        id="mat-HW08", sku="HW08", name="NAILS - PICKET (# Coils)",
        category="08-Hardware", subcategory="Nails", unit_cost=2.48,
        unit_type=UnitType.COIL,
    ),
    # --- 14-Post Cap ---
    Material(
        id="mat-PC01", sku="PC01", name="D2-3/8 Post Cap - Dome",
        category="14-Post Cap", subcategory="Dome", unit_cost=0.71,
    ),
    Material(
        id="mat-IPC01", sku="IPC01", name='Iron Post Cap 2" x 2"',
        category="14-Post Cap", subcategory="Iron", unit_cost=8.50,
    ),
    Material(
        id="mat-PC07", sku="PC07", name="4 Post Cap - Dome",
        category="14-Post Cap", subcategory="4x4", unit_cost=2.46, is_active=False,
    ),
]

SEED_LABOR_CODES: list[LaborCode] = [
    LaborCode(id="lab-W02", sku="W02", description="Set Post 8' OC",
              category="Vertical W", subcategory="Set Post"),
    LaborCode(id="lab-W03", sku="W03", description="Nail Up - Vertical up to 6' High",
              category="Vertical W", subcategory="Nail Up"),
    LaborCode(id="lab-W04", sku="W04", description="Nail Up - Vertical 7' or 8' High",
              category="Vertical W", subcategory="Nail Up"),
    LaborCode(id="lab-M03", sku="M03",
              description="Steel Post - Nail Up - Vertical up to 6' High",
              category="Vertical W", subcategory="Nail Up"),
    LaborCode(id="lab-M04", sku="M04",
              description="Steel Post - Nail Up - Vertical 7' or 8' High",
              category="Vertical W", subcategory="Nail Up"),
    LaborCode(id="lab-W06", sku="W06", description="Goodneighbor Style",
              category="Vertical W", subcategory="Style"),
    LaborCode(id="lab-M06", sku="M06", description="Steel Post - Goodneighbor Style",
              category="Vertical W", subcategory="Style"),
    LaborCode(id="lab-W07", sku="W07", description="Cap and Trim",
              category="Vertical W", subcategory="Cap/Trim"),
    LaborCode(id="lab-M07", sku="M07", description="Steel Post - Cap and Trim",
              category="Vertical W", subcategory="Cap/Trim"),
    LaborCode(id="lab-W08", sku="W08", description="Just Trim/Additional Trim",
              category="Vertical W", subcategory="Cap/Trim"),
    LaborCode(id="lab-W09", sku="W09", description="Just CAP",
              category="Vertical W", subcategory="Cap/Trim"),
    LaborCode(id="lab-W10", sku="W10", description="Wood Gate - Vert - Single (up to 6FT)",
              category="Vertical W", subcategory="Gate", unit_type=UnitType.EACH),
    LaborCode(id="lab-W11", sku="W11", description="Wood Gate - Vertical - Single (8FT)",
              category="Vertical W", subcategory="Gate", unit_type=UnitType.EACH),
    LaborCode(id="lab-W12", sku="W12", description="Horizontal Set Post 6' OC",
              category="Horizontal W", subcategory="Set Post"),
    LaborCode(id="lab-W13", sku="W13", description="Horizontal Nail Up 6' High",
              category="Horizontal W", subcategory="Nail Up"),
    LaborCode(id="lab-W15", sku="W15", description="Horizontal Wood Gate Single",
              category="Horizontal W", subcategory="Gate", unit_type=UnitType.EACH),
    LaborCode(id="lab-IR01", sku="IR01", description="Iron Set Post 8' O.C.",
              category="Iron", subcategory="Set Post"),
    LaborCode(id="lab-IR02", sku="IR02", description="Iron Weld Standard Fence",
              category="Iron", subcategory="Install"),
    LaborCode(id="lab-IR04", sku="IR04", description="Set and Weld Railing - 8' or 10' OC",
              category="Iron", subcategory="Install"),
    LaborCode(id="lab-IR06", sku="IR06",
              description="Weld/Bracket Fence - Ameristar/3 rail - up to 6 FT",
              category="Iron", subcategory="Install"),
    LaborCode(id="lab-IR07", sku="IR07", description="Iron Gate - Single",
              category="Iron", subcategory="Gate", unit_type=UnitType.EACH),
]

_COMPANY_RATES: dict[str, float] = {
    "W02": 2.25,
    "W03": 3.50,
    "W04": 4.25,
    "M03": 4.00,
    "M04": 4.75,
    "W06": 1.50,
    "M06": 1.75,
    "W07": 2.00,
    "M07": 2.25,
    "W08": 1.00,
    "W09": 1.25,
    "W10": 85.00,
    "W11": 110.00,
    "W12": 3.00,
    "W13": 4.50,
    "W15": 95.00,
    "IR01": 3.50,
    "IR02": 6.00,
    "IR04": 7.50,
    "IR06": 6.50,
    "IR07": 150.00,
}

SEED_LABOR_RATES: list[LaborRate] = [
    LaborRate(labor_code_id=f"lab-{sku}", rate=rate) for sku, rate in _COMPANY_RATES.items()
] + [
    LaborRate(labor_code_id="lab-W02", rate=2.50, business_unit_id="ATX-RES"),
    LaborRate(labor_code_id="lab-W03", rate=3.75, business_unit_id="ATX-RES"),
    LaborRate(labor_code_id="lab-M03", rate=4.25, business_unit_id="ATX-RES"),
]


def _material_rule(
    rule_id: str,
    product_type: str,
    role: str,
    category: str,
    subcategory: str | None = None,
    **kwargs: object,
) -> EligibilityRule:
    mode = SelectionMode.SUBCATEGORY if subcategory else SelectionMode.CATEGORY
    return EligibilityRule(
        id=rule_id,
        product_type_code=product_type,
        role_code=role,
        selection_mode=mode,
        category=category,
        subcategory=subcategory,
        **kwargs,
    )


def _labor_rule(
    rule_id: str,
    product_type: str,
    role: str,
    sku: str,
    display_order: int = 0,
    **attribute_filter: list[str],
) -> EligibilityRule:
    return EligibilityRule(
        id=rule_id,
        kind=RuleKind.LABOR,
        product_type_code=product_type,
        role_code=role,
        selection_mode=SelectionMode.SPECIFIC,
        target_id=f"lab-{sku}",
        attribute_filter=attribute_filter,
        is_default=True,
        display_order=display_order,
    )


def _mix_rules(prefix: str, product_type: str) -> list[EligibilityRule]:
    """Each three-part mix role takes exactly one bag."""
    return [
        EligibilityRule(
            id=f"{prefix}-{role.replace('_', '-')}",
            product_type_code=product_type,
            role_code=role,
            selection_mode=SelectionMode.SPECIFIC,
            target_id=material_id,
            is_default=True,
        )
        for role, material_id in (
            ("concrete_sand", "mat-CTS"),
            ("concrete_cement", "mat-CTP"),
            ("concrete_quickrock", "mat-CTQ"),
        )
    ]


SEED_RULES: list[EligibilityRule] = [
    # --- Wood vertical materials ---
    _material_rule("wv-post-wood", WOOD_VERTICAL, "post", "01-Post", "Wood 4x4",
                   attribute_filter={"post_type": ["WOOD"]}, is_default=True),
    _material_rule("wv-post-steel", WOOD_VERTICAL, "post", "01-Post", "Steel Post",
                   attribute_filter={"post_type": ["STEEL"]}, is_default=True),
    _material_rule("wv-picket", WOOD_VERTICAL, "picket", "02-Pickets", is_default=True),
    _material_rule("wv-rail", WOOD_VERTICAL, "rail", "03-Rails", "2x4 Rails", is_default=True),
    _material_rule("wv-cap", WOOD_VERTICAL, "cap", "04-Caps, Trims & Nailers", "Cap",
                   is_default=True),
    _material_rule("wv-trim", WOOD_VERTICAL, "trim", "04-Caps, Trims & Nailers", "Trim",
                   is_default=True),
    _material_rule("wv-rot-board", WOOD_VERTICAL, "rot_board", "04-Caps, Trims & Nailers",
                   "Rot Board", is_default=True),
    _material_rule("wv-bracket", WOOD_VERTICAL, "bracket", "08-Hardware", "Brackets",
                   attribute_filter={"post_type": ["STEEL"]}, is_default=True),
    _material_rule("wv-steel-cap", WOOD_VERTICAL, "steel_post_cap", "14-Post Cap", "Dome",
                   attribute_filter={"post_type": ["STEEL"]}, is_default=True),
    _material_rule("wv-nails", WOOD_VERTICAL, "nails_picket", "08-Hardware", "Nails",
                   is_default=True),
    _material_rule("wv-concrete", WOOD_VERTICAL, "concrete", "06-Concrete", is_default=True),
    *_mix_rules("wv", WOOD_VERTICAL),
    # --- Wood horizontal materials ---
    _material_rule("wh-post-wood", WOOD_HORIZONTAL, "post", "01-Post", "Wood 4x4",
                   attribute_filter={"post_type": ["WOOD"]}, is_default=True),
    _material_rule("wh-post-steel", WOOD_HORIZONTAL, "post", "01-Post", "Steel Post",
                   attribute_filter={"post_type": ["STEEL"]}, is_default=True),
    # Boards must span a full 8' bay.
    _material_rule("wh-board", WOOD_HORIZONTAL, "board", "02-Pickets", "02-02 1x6 Pickets",
                   min_length_ft=8, is_default=True),
    _material_rule("wh-nailer", WOOD_HORIZONTAL, "nailer", "04-Caps, Trims & Nailers",
                   "Nailer", is_default=True),
    _material_rule("wh-cap", WOOD_HORIZONTAL, "cap", "04-Caps, Trims & Nailers", "Cap",
                   is_default=True),
    _material_rule("wh-vertical-trim", WOOD_HORIZONTAL, "vertical_trim",
                   "04-Caps, Trims & Nailers", "Vertical Trim", is_default=True),
    _material_rule("wh-steel-cap", WOOD_HORIZONTAL, "steel_post_cap", "14-Post Cap", "Dome",
                   attribute_filter={"post_type": ["STEEL"]}, is_default=True),
    _material_rule("wh-concrete", WOOD_HORIZONTAL, "concrete", "06-Concrete",
                   is_default=True),
    *_mix_rules("wh", WOOD_HORIZONTAL),
    # --- Iron materials ---
    _material_rule("ir-post", IRON, "post", "01-Post", "Iron Squared Post", is_default=True),
    _material_rule("ir-panel", IRON, "panel", "05-Iron Panels", "2 Rail F/F",
                   attribute_filter={"style": ["standard-2-rail", "iron-rail"]},
                   is_default=True),
    _material_rule("ir-panel-ameristar", IRON, "panel", "05-Iron Panels", "Ameristar",
                   attribute_filter={"style": ["ameristar"]}, is_default=True),
    _material_rule("ir-bracket", IRON, "bracket", "08-Hardware", "Iron Brackets",
                   attribute_filter={"style": ["ameristar"], "post_type": ["STEEL"]},
                   is_default=True),
    _material_rule("ir-steel-cap", IRON, "steel_post_cap", "14-Post Cap", "Iron",
                   attribute_filter={"post_type": ["STEEL"]}, is_default=True),
    _material_rule("ir-concrete", IRON, "concrete", "06-Concrete", is_default=True),
    *_mix_rules("ir", IRON),
    # --- Wood vertical labor ---
    _labor_rule("wv-set-posts", WOOD_VERTICAL, "set_posts", "W02"),
    _labor_rule("wv-install-w03", WOOD_VERTICAL, "install", "W03", 2,
                post_type=["WOOD"], height=_UP_TO_SIX_FT),
    _labor_rule("wv-install-w04", WOOD_VERTICAL, "install", "W04", 3,
                post_type=["WOOD"], height=_OVER_SIX_FT),
    _labor_rule("wv-install-m03", WOOD_VERTICAL, "install", "M03", 4,
                post_type=["STEEL"], height=_UP_TO_SIX_FT),
    _labor_rule("wv-install-m04", WOOD_VERTICAL, "install", "M04", 5,
                post_type=["STEEL"], height=_OVER_SIX_FT),
    _labor_rule("wv-style-w06", WOOD_VERTICAL, "style_labor", "W06", 7,
                post_type=["WOOD"], style=["good-neighbor"]),
    _labor_rule("wv-style-m06", WOOD_VERTICAL, "style_labor", "M06", 8,
                post_type=["STEEL"], style=["good-neighbor"]),
    _labor_rule("wv-cap-trim-w07", WOOD_VERTICAL, "cap_trim_labor", "W07", 9,
                post_type=["WOOD"], has_cap=["true"], has_trim=["true"]),
    _labor_rule("wv-cap-trim-m07", WOOD_VERTICAL, "cap_trim_labor", "M07", 10,
                post_type=["STEEL"], has_cap=["true"], has_trim=["true"]),
    _labor_rule("wv-trim-w08", WOOD_VERTICAL, "cap_trim_labor", "W08", 11,
                has_cap=["false"], has_trim=["true"]),
    _labor_rule("wv-cap-w09", WOOD_VERTICAL, "cap_trim_labor", "W09", 12,
                has_cap=["true"], has_trim=["false"]),
    _labor_rule("wv-gate-w10", WOOD_VERTICAL, "gate_labor", "W10", 13,
                height=_UP_TO_SIX_FT),
    _labor_rule("wv-gate-w11", WOOD_VERTICAL, "gate_labor", "W11", 14,
                height=_OVER_SIX_FT),
    # --- Wood horizontal labor ---
    _labor_rule("wh-set-posts", WOOD_HORIZONTAL, "set_posts", "W12"),
    _labor_rule("wh-install", WOOD_HORIZONTAL, "install", "W13"),
    _labor_rule("wh-gate", WOOD_HORIZONTAL, "gate_labor", "W15"),
    # --- Iron labor ---
    _labor_rule("ir-set-posts", IRON, "set_posts", "IR01"),
    _labor_rule("ir-install-ir02", IRON, "install", "IR02", style=["standard-2-rail"]),
    _labor_rule("ir-install-ir06", IRON, "install", "IR06", style=["ameristar"]),
    _labor_rule("ir-install-ir04", IRON, "install", "IR04", style=["iron-rail"]),
    _labor_rule("ir-gate", IRON, "gate_labor", "IR07"),
]

SEED_PARAMETERS: list[FormulaParameter] = [
    # --- Wood vertical defaults ---
    FormulaParameter(key="waste_factor", value=1.025, product_type_code=WOOD_VERTICAL),
    FormulaParameter(key="style_multiplier", value=1.0, product_type_code=WOOD_VERTICAL),
    FormulaParameter(key="side_multiplier", value=1.0, product_type_code=WOOD_VERTICAL),
    FormulaParameter(key="rail_count", value=2, product_type_code=WOOD_VERTICAL),
    FormulaParameter(key="nails_per_picket", value=2, product_type_code=WOOD_VERTICAL),
    FormulaParameter(key="nails_per_coil", value=300, product_type_code=WOOD_VERTICAL),
    # Bags per post for a concrete material that carries no rate of its own.
    FormulaParameter(key="concrete_bags_per_post", value=1.0, product_type_code=WOOD_VERTICAL),
    # --- Wood horizontal defaults ---
    FormulaParameter(key="waste_factor", value=1.0, product_type_code=WOOD_HORIZONTAL),
    FormulaParameter(key="side_multiplier", value=1.0, product_type_code=WOOD_HORIZONTAL),
    FormulaParameter(
        key="concrete_bags_per_post", value=1.0, product_type_code=WOOD_HORIZONTAL
    ),
    # Good neighbor boards go on both faces; cap and trim do not double.
    FormulaParameter(
        key="side_multiplier",
        value=2.0,
        product_type_code=WOOD_HORIZONTAL,
        product_style_code="good-neighbor",
        role_code="board",
    ),
    # --- Iron defaults ---
    FormulaParameter(key="rail_count", value=2, product_type_code=IRON),
    FormulaParameter(key="brackets_per_rail", value=2, product_type_code=IRON),
    FormulaParameter(key="concrete_bags_per_post", value=1.0, product_type_code=IRON),
    FormulaParameter(
        key="rail_count", value=3, product_type_code=IRON, product_style_code="ameristar"
    ),
]

SEED_CONFIGURATIONS: list[Configuration] = [
    Configuration(
        id="cfg-A01",
        sku="A01",
        product_type_code=WOOD_VERTICAL,
        product_style_code="standard",
        height=6,
        post_type=PostType.WOOD,
        rail_count=2,
        materials={
            "post": "mat-PS13",
            "picket": "mat-P601",
            "rail": "mat-RA01",
            "nails_picket": "mat-HW08",
            "concrete": "mat-CTR",
        },
    ),
    Configuration(
        id="cfg-A07",
        sku="A07",
        product_type_code=WOOD_VERTICAL,
        product_style_code="good-neighbor",
        height=6,
        post_type=PostType.WOOD,
        rail_count=2,
        materials={
            "post": "mat-PS13",
            "picket": "mat-P601",
            "rail": "mat-RA01",
            "cap": "mat-CTN09",
            "trim": "mat-CTN07",
            "nails_picket": "mat-HW08",
            "concrete": "mat-CTR",
        },
    ),
    Configuration(
        id="cfg-B03",
        sku="B03",
        product_type_code=WOOD_VERTICAL,
        product_style_code="board-on-board",
        height=8,
        post_type=PostType.WOOD,
        rail_count=3,
        materials={
            "post": "mat-PS12",
            "picket": "mat-P603",
            "rail": "mat-RA02",
            "rot_board": "mat-RB01",
            "cap": "mat-CTN02",
            "concrete": "mat-CTR",
        },
    ),
    Configuration(
        id="cfg-C01",
        sku="C01",
        product_type_code=WOOD_VERTICAL,
        product_style_code="standard",
        height=6,
        post_type=PostType.STEEL,
        rail_count=3,
        materials={
            "post": "mat-PS04",
            "picket": "mat-P601",
            "rail": "mat-RA01",
            "bracket": "mat-HW06",
            "steel_post_cap": "mat-PC01",
            "concrete": "mat-CTR",
        },
    ),
    Configuration(
        id="cfg-H01",
        sku="H01",
        product_type_code=WOOD_HORIZONTAL,
        product_style_code="standard",
        height=6,
        post_type=PostType.WOOD,
        materials={
            "post": "mat-PS13",
            "board": "mat-P804",
            "nailer": "mat-CTN04",
            "cap": "mat-CTN09",
            "vertical_trim": "mat-CTN11",
            "concrete": "mat-CTR",
        },
    ),
    Configuration(
        id="cfg-I01",
        sku="I01",
        product_type_code=IRON,
        product_style_code="standard-2-rail",
        height=4,
        post_type=PostType.STEEL,
        materials={
            "post": "mat-PS10",
            "panel": "mat-IP05",
            "steel_post_cap": "mat-IPC01",
            "concrete": "mat-CTY",
        },
    ),
    Configuration(
        id="cfg-I04",
        sku="I04",
        product_type_code=IRON,
        product_style_code="ameristar",
        height=6,
        post_type=PostType.STEEL,
        materials={
            "post": "mat-PS10",
            "panel": "mat-NS04",
            "bracket": "mat-IB01",
            "steel_post_cap": "mat-IPC01",
            "concrete": "mat-CTY",
        },
    ),
]
