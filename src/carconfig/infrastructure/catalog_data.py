"""Built-in catalog, in the category -> ordered records format.

First entry of each single-select category is the factory default.
"""

DEFAULT_CATALOG: dict[str, list[dict]] = {
    "variants": [
        {
            "id": "ax",
            "name": "AX (Standard)",
            "base_price": 1500000,
            "description": "The perfect entry point to the Thar experience with essential features",
            "features": [
                "4x4 Capability",
                "Manual Transmission",
                "Basic Interior",
                "Standard Safety Features",
            ],
        },
        {
            "id": "lx",
            "name": "LX (Luxury)",
            "base_price": 1800000,
            "description": "Premium comfort meets off-road capability",
            "features": [
                "4x4 Capability",
                "Automatic Transmission",
                "Premium Interior",
                "Advanced Safety Features",
                "Climate Control",
            ],
        },
        {
            "id": "x",
            "name": "X (Off-Road)",
            "base_price": 2000000,
            "description": "Ultimate off-road performance with premium features",
            "features": [
                "Enhanced 4x4 System",
                "Automatic Transmission",
                "Luxury Interior",
                "Advanced Safety Suite",
                "Off-Road Assist",
                "Premium Audio System",
            ],
        },
    ],
    "colors": [
        {"id": "napoli-black", "name": "Napoli Black", "price": 0, "hex": "#000000"},
        {"id": "galaxy-grey", "name": "Galaxy Grey", "price": 15000, "hex": "#4A4A4A"},
        {"id": "aquamarine-blue", "name": "Aquamarine Blue", "price": 25000, "hex": "#00CED1"},
        {"id": "rocky-beige", "name": "Rocky Beige", "price": 20000, "hex": "#D2B48C"},
        {"id": "deep-forest-green", "name": "Deep Forest Green", "price": 30000, "hex": "#228B22"},
    ],
    "roofs": [
        {"id": "hardtop", "name": "Hardtop", "price": 0, "compatible_with": ["ax", "lx", "x"]},
        {"id": "convertible", "name": "Convertible", "price": 50000, "compatible_with": ["lx", "x"]},
        {"id": "soft-top", "name": "Soft Top", "price": 30000, "compatible_with": ["ax", "lx", "x"]},
    ],
    "wheels": [
        {"id": "standard-r17", "name": "Standard R17", "price": 0, "size": "R17", "type": "standard"},
        {"id": "alloy-r18", "name": "Alloy R18", "price": 45000, "size": "R18", "type": "alloy"},
        {"id": "offroad-at-r19", "name": "Off-road AT R19", "price": 75000, "size": "R19", "type": "offroad"},
    ],
    "interior": [
        {"id": "dual-tone-dashboard", "name": "Dual-tone Dashboard", "price": 25000, "category": "dashboard"},
        {"id": "leather-seats", "name": "Leather Seat Upgrade", "price": 60000, "category": "seats"},
        {"id": "red-stitching", "name": "Red Stitching Trim", "price": 15000, "category": "trim"},
        {"id": "ambient-lighting", "name": "Ambient Lighting", "price": 35000, "category": "lighting"},
    ],
    "add_ons": [
        {
            "id": "front-bullbar",
            "name": "Front Bullbar",
            "price": 45000,
            "category": "protection",
            "compatible_with": ["ax", "lx", "x"],
        },
        {
            "id": "rear-ladder",
            "name": "Rear Ladder",
            "price": 25000,
            "category": "utility",
            "compatible_with": ["lx", "x"],
        },
        {
            # Needs a hardtop; that is enforced by the roof rules, not here.
            "id": "roof-carrier",
            "name": "Roof Carrier",
            "price": 35000,
            "category": "utility",
            "compatible_with": ["ax", "lx", "x"],
        },
        {
            "id": "winch-mount",
            "name": "Winch Mount",
            "price": 55000,
            "category": "utility",
            "compatible_with": ["x"],
        },
        {
            "id": "snorkel-kit",
            "name": "Snorkel Kit",
            "price": 40000,
            "category": "utility",
            "compatible_with": ["x"],
        },
        {
            "id": "underbody-protection",
            "name": "Underbody Protection",
            "price": 65000,
            "category": "protection",
            "compatible_with": ["ax", "lx", "x"],
        },
    ],
    "tech_packs": [
        {
            "id": "touchscreen-nav",
            "name": "10-inch Touchscreen + Navigation",
            "price": 75000,
            "features": [
                "10-inch HD Display",
                "Built-in Navigation",
                "Apple CarPlay & Android Auto",
                "Voice Commands",
            ],
        },
        {
            "id": "sony-audio",
            "name": "Sony Audio System",
            "price": 45000,
            "features": ["Premium Sony Speakers", "Subwoofer", "Amplified Sound", "Custom EQ Settings"],
        },
        {
            "id": "offroad-assist",
            "name": "Off-Road Assist Package",
            "price": 85000,
            "features": [
                "Digital Inclinometer",
                "Tire Pressure Monitoring",
                "Compass & Altimeter",
                "Terrain Response System",
            ],
        },
        {
            "id": "360-camera",
            "name": "360° Camera Setup",
            "price": 65000,
            "features": [
                "Surround View Camera",
                "Parking Assist",
                "Off-road Camera Views",
                "Recording Capability",
            ],
        },
    ],
    "decals": [
        {"id": "retro-stripe", "name": "Retro Stripe Decal", "price": 15000, "type": "stripe"},
        {"id": "matte-wrap", "name": "Matte Wrap", "price": 120000, "type": "wrap"},
        {"id": "custom-plate", "name": "Custom Number Plate", "price": 5000, "type": "plate"},
        {"id": "side-mirror-tints", "name": "Side Mirror Tints", "price": 8000, "type": "tint"},
    ],
}
