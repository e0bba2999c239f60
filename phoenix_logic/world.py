"""USS Phoenix world definition: rooms, items, connections, and lock requirements."""

from phoenix_logic.errors import WorldDefinitionError

ROOMS = {
    "command_center": {
        "name": "Command Center",
        "description": (
            "Emergency lighting casts an eerie red glow. Multiple system "
            "failure alerts flash on darkened screens."
        ),
        "exits": {"north": "bridge", "south": "main_corridor"},
        "items": ["emergency_codes"],
        "locked": False,
    },
    "bridge": {
        "name": "Bridge",
        "description": (
            "The captain's bridge is in chaos. Navigation systems are offline, "
            "the viewscreen shows static."
        ),
        "exits": {"south": "command_center", "east": "navigation", "west": "communications"},
        "items": ["bridge_key", "captain_logs"],
        "locked": False,
    },
    "navigation": {
        "name": "Navigation",
        "description": (
            "Star charts flicker weakly. The quantum compass spins wildly "
            "without AI guidance."
        ),
        "exits": {"west": "bridge"},
        "items": ["nav_codes", "stellar_maps"],
        "locked": True,
        "unlock_requires": ["bridge_key"],
    },
    "communications": {
        "name": "Communications",
        "description": "All external communications are down. The distress beacon is offline.",
        "exits": {"east": "bridge"},
        "items": ["comm_relay", "distress_codes"],
        "locked": True,
        "unlock_requires": ["nav_codes"],
    },
    "main_corridor": {
        "name": "Main Corridor",
        "description": (
            "The main artery of the ship. Flickering emergency lights barely "
            "illuminate the way."
        ),
        "exits": {
            "north": "command_center",
            "west": "engineering",
            "east": "security",
            "south": "life_support",
        },
        "items": ["repair_kit"],
        "locked": False,
    },
    "engineering": {
        "name": "Engineering Bay",
        "description": (
            "Massive machinery stands silent. Fusion reactor controls are "
            "locked behind safety protocols."
        ),
        "exits": {"east": "main_corridor", "south": "power_core"},
        "items": ["power_cell", "engineering_tools"],
        "locked": True,
        "unlock_requires": ["emergency_codes"],
    },
    "power_core": {
        "name": "Power Core",
        "description": (
            "The ship's central power reactor. Radiation warnings flash, "
            "the core is in shutdown mode."
        ),
        "exits": {"north": "engineering"},
        "items": ["fusion_key", "radiation_suit"],
        "locked": True,
        "unlock_requires": ["power_cell"],
    },
    "security": {
        "name": "Security Office",
        "description": (
            "A high-security monitoring station. Multiple screens show "
            "various ship areas."
        ),
        "exits": {"west": "main_corridor", "south": "armory"},
        "items": ["security_codes", "surveillance_data"],
        "locked": True,
        "unlock_requires": ["emergency_codes"],
    },
    "armory": {
        "name": "Armory",
        "description": (
            "Weapon storage with plasma rifle mounts. Most weapons are locked "
            "behind barriers."
        ),
        "exits": {"north": "security"},
        "items": ["plasma_rifle", "armor_vest", "ammo_clip"],
        "locked": True,
        "unlock_requires": ["security_codes"],
    },
    "life_support": {
        "name": "Life Support",
        "description": (
            "Atmospheric processors struggle to maintain breathable air. "
            "Oxygen is dropping steadily."
        ),
        "exits": {"north": "main_corridor", "west": "medical_bay", "east": "laboratory"},
        "items": ["env_codes", "air_filter"],
        "locked": True,
        "unlock_requires": ["engineering_tools"],
    },
    "medical_bay": {
        "name": "Medical Bay",
        "description": (
            "An advanced medical facility with bio-regeneration pods and "
            "surgical arrays."
        ),
        "exits": {"east": "life_support"},
        "items": ["medkit", "bio_scanner", "stim_pack"],
        "locked": True,
        "unlock_requires": ["env_codes"],
    },
    "laboratory": {
        "name": "Laboratory",
        "description": (
            "Research equipment hums on backup power. This is where the AI "
            "repair matrix can be synthesized."
        ),
        "exits": {"west": "life_support", "south": "fabrication"},
        "items": ["research_pass", "ai_matrix_components"],
        "locked": True,
        "unlock_requires": ["fusion_key"],
    },
    "fabrication": {
        "name": "Fabrication Lab",
        "description": (
            "An automated manufacturing facility with molecular printers and "
            "raw material processors."
        ),
        "exits": {"north": "laboratory", "west": "cargo_bay"},
        "items": ["fabricator", "raw_materials", "blueprint_scanner"],
        "locked": True,
        "unlock_requires": ["research_pass"],
    },
    "cargo_bay": {
        "name": "Cargo Bay",
        "description": (
            "A massive storage area with floating containers. Emergency "
            "supplies are scattered after the evacuation."
        ),
        "exits": {"east": "fabrication", "south": "detention"},
        "items": ["supply_crate", "gravity_boots", "emergency_beacon"],
        "locked": False,
    },
    "detention": {
        "name": "Detention Block",
        "description": (
            "The ship's security detention area. Emergency lockdown protocols "
            "have sealed most cells."
        ),
        "exits": {"north": "cargo_bay", "east": "ai_core"},
        "items": ["security_key", "prisoner_log"],
        "locked": True,
        "unlock_requires": ["security_codes"],
    },
    "ai_core": {
        "name": "AI Core",
        "description": (
            "The central AI housing. Massive quantum processors stand silent. "
            "Restore the ship's intelligence here."
        ),
        "exits": {"west": "detention"},
        "items": ["ai_activation_key"],
        "locked": True,
        "unlock_requires": ["env_codes", "research_pass"],
        "final_objective": True,
    },
}

ITEMS = {
    "flashlight": {"name": "Emergency Flashlight", "description": "Provides light in dark areas.", "value": 25},
    "emergency_scanner": {"name": "Emergency Scanner", "description": "Detects system failures and hazards.", "value": 50},
    "emergency_codes": {"name": "Emergency Codes", "description": "Access codes for critical systems.", "value": 100},
    "bridge_key": {"name": "Bridge Access Key", "description": "Unlocks navigation and other bridge systems.", "value": 200},
    "captain_logs": {"name": "Captain's Logs", "description": "Personal logs from the captain.", "value": 150},
    "nav_codes": {"name": "Navigation Codes", "description": "Quantum navigation access codes.", "value": 300},
    "stellar_maps": {"name": "Stellar Maps", "description": "Current sector navigation data.", "value": 250},
    "comm_relay": {"name": "Comm Relay", "description": "Backup communication device.", "value": 400},
    "distress_codes": {"name": "Distress Codes", "description": "Authorization codes for the distress beacon.", "value": 350},
    "repair_kit": {"name": "Engineering Repair Kit", "description": "Tools for fixing ship systems.", "value": 350},
    "power_cell": {"name": "Power Cell", "description": "Portable energy storage unit.", "value": 500},
    "engineering_tools": {"name": "Engineering Tools", "description": "Specialized repair equipment.", "value": 450},
    "fusion_key": {"name": "Fusion Access Key", "description": "Activates fusion reactor controls.", "value": 800},
    "radiation_suit": {"name": "Radiation Suit", "description": "Protection from reactor radiation.", "value": 600},
    "security_codes": {"name": "Security Codes", "description": "Security access codes for ship systems.", "value": 500},
    "surveillance_data": {"name": "Surveillance Data", "description": "Security camera footage and monitoring data.", "value": 200},
    "plasma_rifle": {"name": "Plasma Rifle", "description": "High-energy plasma weapon.", "value": 500},
    "armor_vest": {"name": "Combat Armor", "description": "Military-grade body armor.", "value": 300},
    "ammo_clip": {"name": "Ammo Clip", "description": "High-capacity ammunition.", "value": 100},
    "env_codes": {"name": "Environmental Codes", "description": "Life support system access.", "value": 700},
    "air_filter": {"name": "Air Filter", "description": "Emergency atmospheric processor.", "value": 300},
    "medkit": {"name": "Advanced Medkit", "description": "Sophisticated medical kit.", "value": 200},
    "bio_scanner": {"name": "Bio-Scanner", "description": "Advanced medical scanning device.", "value": 350},
    "stim_pack": {"name": "Stim Pack", "description": "Emergency medical stimulant.", "value": 100},
    "research_pass": {"name": "Research Clearance", "description": "Access to laboratory systems.", "value": 750},
    "ai_matrix_components": {"name": "AI Matrix Components", "description": "Essential for AI reconstruction.", "value": 1000},
    "fabricator": {"name": "Molecular Fabricator", "description": "Advanced molecular printing device.", "value": 800},
    "raw_materials": {"name": "Raw Materials", "description": "Assorted crafting materials.", "value": 75},
    "blueprint_scanner": {"name": "Blueprint Scanner", "description": "Scans and stores item blueprints.", "value": 400},
    "supply_crate": {"name": "Supply Crate", "description": "Military supply crate with various items.", "value": 200},
    "gravity_boots": {"name": "Anti-Grav Boots", "description": "Magnetic boots for wall walking.", "value": 250},
    "emergency_beacon": {"name": "Emergency Beacon", "description": "Distress beacon for emergency communications.", "value": 150},
    "security_key": {"name": "Security Key", "description": "Master security override key.", "value": 300},
    "prisoner_log": {"name": "Prisoner Log", "description": "Log files from the detention facilities.", "value": 100},
    "ai_activation_key": {"name": "AI Activation Key", "description": "Final component for the AI reboot.", "value": 2000},
}

START_ROOM = "command_center"
STARTER_INVENTORY = ("flashlight", "emergency_scanner")

# Rooms open from the start of every session
PRE_UNLOCKED_ROOMS = ("command_center", "main_corridor", "bridge")

FINAL_ROOM = "ai_core"
WIN_ITEM = "ai_activation_key"
WIN_COMPONENT = "ai_matrix_components"
SCANNER_ITEM = "emergency_scanner"


def validate_world(rooms: dict, items: dict, start_room: str) -> None:
    """Check the static tables. Raises WorldDefinitionError listing every problem."""
    problems = []

    if start_room not in rooms:
        problems.append(f"start room '{start_room}' is not defined")

    finals = [key for key, room in rooms.items() if room.get("final_objective")]
    if len(finals) != 1:
        problems.append(f"expected exactly one final objective room, found {len(finals)}")

    for key, room in rooms.items():
        for direction, target in room.get("exits", {}).items():
            if target not in rooms:
                problems.append(f"{key}: exit '{direction}' leads to unknown room '{target}'")
        for item_key in room.get("items", []):
            if item_key not in items:
                problems.append(f"{key}: unknown item '{item_key}'")
        for item_key in room.get("unlock_requires", []):
            if item_key not in items:
                problems.append(f"{key}: unlock requires unknown item '{item_key}'")

    if problems:
        raise WorldDefinitionError(problems)
