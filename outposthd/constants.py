"""Numeric, string and user-interface constants used throughout the game."""

# =====================================
# = NUMBERS
# =====================================
FADE_SPEED = 175

PLANET_ANIMATION_SPEED = 50

MINIMUM_RESOURCES_REQUIRE_FOR_SMELTING = 20

BASE_STORAGE_CAPACITY = 250

BASE_PRODUCT_CAPACITY = 100

BASE_MINE_PRODUCTION_RATE = 10
BASE_MINE_SHAFT_EXTENSION_TIME = 10

DEPTH_SURFACE = 0
DEPTH_UNDERGROUND_1 = 1
DEPTH_UNDERGROUND_2 = 2
DEPTH_UNDERGROUND_3 = 3
DEPTH_UNDERGROUND_4 = 4

COLONY_SHIP_ORBIT_TIME = 24

MINER_TASK_TIME = 6

COMMAND_CENTER_POPULATION_CAPACITY = 10
MINIMUM_RESIDENCE_OVERCAPACITY_HIT = 1

ROBOT_COMMAND_CAPACITY = 10

DEFAULT_STARTING_MORALE = 600

MINIMUM_WINDOW_WIDTH = 1000
MINIMUM_WINDOW_HEIGHT = 700

ROBOT_COM_RANGE = 15.0
COMM_TOWER_BASE_RANGE = 10.0
LANDER_COM_RANGE = 5.0

# =====================================
# = MISCELLANEOUS
# =====================================
VERSION = "v0.7.11"
EMPTY_STR = ""

PLANET_DESCRIPTION_GANYMEDE = (
    "Like Jupiter's moon Ganymede, this planet contains a sub-surface ocean and a "
    "magnetic field. Despite having a magnetic field indicating a liquid core, there "
    "is no atpmosphere. \n \n This planet tends to be farther from the host star so "
    "solar satellites aren't going to be very useful."
)
PLANET_DESCRIPTION_MARS = (
    "This planet is a lot like our very own Mars. It is a relatively easy planet to "
    "colonize with a marginal atmosphere, lots of potential mining locations and you "
    "can dig deep. \n \n This leads to the problem that, while mines are plentiful, "
    "they don't yield a lot of resources."
)
PLANET_DESCRIPTION_MERCURY = (
    "Small, hot and not very friendly. This planet resembles our very own Mercury. "
    "Close to its parent star, few potential mine locations, very shallow dig depth, "
    "no magnetic field and no atmpsphere. \n \n The Payoff? The few mines you do get "
    "are higher yield and you get plenty of solar energy."
)

TILE_INDEX_TRANSLATION_BULLDOZED = "Bulldozed"
TILE_INDEX_TRANSLATION_CLEAR = "Clear"
TILE_INDEX_TRANSLATION_ROUGH = "Rough"
TILE_INDEX_TRANSLATION_DIFFICULT = "Difficult"
TILE_INDEX_TRANSLATION_IMPASSABLE = "Impassable"

MINE_YIELD_LOW = "Low"
MINE_YIELD_MEDIUM = "Medium"
MINE_YIELD_HIGH = "High"

ROBOT_BREAKDOWN_TITLE = "Robot Breakdown"
ROBOT_BREAKDOWN_MESSAGE = (
    "Your %s at location %i, %i has broken down. It will not be able to complete "
    "its task and will be removed from your inventory."
)

PRODUCT_TRANSFER_TITLE = "Remaining Product"
PRODUCT_TRANSFER_MESSAGE = (
    "Bulldozing this Warehouse will result in some products being discarded due to "
    "insufficient storage space at other warehouses.\n\nDo you want to discard these "
    "products?"
)

# =====================================
# = SAVE GAMES
# =====================================
SAVE_GAME_PATH = "savegames/"
SAVE_GAME_VERSION = "0.30"
SAVE_GAME_ROOT_NODE = "OutpostHD_SaveGame"

# =====================================
# = RESOURCES
# =====================================
SAVE_GAME_COMMON_METAL_ORE = "common_metal_ore"
SAVE_GAME_COMMON_MINERAL_ORE = "common_mineral_ore"
SAVE_GAME_RARE_METAL_ORE = "rare_metal_ore"
SAVE_GAME_RARE_MINERAL_ORE = "rare_mineral_ore"

SAVE_GAME_COMMON_METAL = "common_metal"
SAVE_GAME_COMMON_MINERAL = "common_mineral"
SAVE_GAME_RARE_METAL = "rare_metal"
SAVE_GAME_RARE_MINERAL = "rare_mineral"

SAVE_GAME_ENERGY = "energy"
SAVE_GAME_FOOD = "food"

# =====================================
# = PRODUCT POOL
# =====================================
SAVE_GAME_PRODUCT_DIGGER = "digger"
SAVE_GAME_PRODUCT_DOZER = "dozer"
SAVE_GAME_PRODUCT_MINER = "miner"
SAVE_GAME_PRODUCT_EXPLORER = "explorer"
SAVE_GAME_PRODUCT_TRUCK = "truck"
SAVE_GAME_PRODUCT_ROAD_MATERIALS = "road_materials"
SAVE_GAME_MAINTENANCE_PARTS = "maintenance_parts"

SAVE_GAME_PRODUCT_CLOTHING = "clothing"
SAVE_GAME_PRODUCT_MEDICINE = "medicine"

# =====================================
# = FACTORY PRODUCTS
# =====================================
NONE = "None"
ROBODIGGER = "Robodigger"
ROBODOZER = "Robodozer"
ROBOEXPLORER = "Roboexplorer"
ROBOMINER = "Robominer"
ROAD_MATERIALS = "Road Materials"
MAINTENANCE_SUPPLIES = "Maintenance Supplies"
TRUCK = "Truck"

CLOTHING = "Clothing"
MEDICINE = "Medicine"

# =====================================
# = STRUCTURES
# =====================================
AGRIDOME = "Agricultural Dome"
AIR_SHAFT = "Air Shaft"
CARGO_LANDER = "Cargo Lander"
CHAP = "CHAP Facility"
COLONIST_LANDER = "Colonist Lander"
COMMAND_CENTER = "Command Center"
COMMERCIAL = "Commercial"
COMM_TOWER = "Communications Tower"
FUSION_REACTOR = "Fusion Reactor"
HOT_LABORATORY = "Hot Laboratory"
LABORATORY = "Laboratory"
MEDICAL_CENTER = "Medical Center"
MINE_FACILITY = "Mine Facility"
MINE_SHAFT = "Mine Shaft"
NURSERY = "Nursery"
PARK = "Park / Reservoir "
RECREATION_CENTER = "Recreation Center"
RED_LIGHT_DISTRICT = "Red Light District"
RESIDENCE = "Residential Facility"
ROBOT_COMMAND = "Robot Command"
SEED_FACTORY = "SEED Factory"
SEED_LANDER = "SEED Lander"
SEED_POWER = "SEED Power"
SEED_SMELTER = "SEED Smelter"
SMELTER = "Smelter"
SOLAR_PLANT = "Solar Powersat Receiver Array"
SOLAR_PANEL1 = "Solar Panel Array"
STORAGE_TANKS = "Storage Tanks"
SURFACE_FACTORY = "Surface Factory"
SURFACE_POLICE = "Police"
TUBE = "Tube"
UNDERGROUND_FACTORY = "Underground Factory"
UNDERGROUND_POLICE = "Police (UG)"
UNIVERSITY = "University"
WAREHOUSE = "Warehouse"

# =====================================
# = TUBE STATES
# =====================================
AG_TUBE_INTERSECTION = "ag_intersection"
AG_TUBE_RIGHT = "ag_right"
AG_TUBE_LEFT = "ag_left"

UG_TUBE_INTERSECTION = "ug_intersection"
UG_TUBE_RIGHT = "ug_right"
UG_TUBE_LEFT = "ug_left"

# =====================================
# = SUB LEVEL STRINGS
# =====================================
LEVEL_SURFACE = "Surface"
LEVEL_UG1 = "Underground 1"
LEVEL_UG2 = "Underground 2"
LEVEL_UG3 = "Underground 3"
LEVEL_UG4 = "Underground 4"

# =====================================
# = STRUCTURE ANIMATION STATES
# =====================================
STRUCTURE_STATE_CONSTRUCTION = "construction"
STRUCTURE_STATE_OPERATIONAL = "operational"
STRUCTURE_STATE_OPERATIONAL_UG = "operational-ug"
STRUCTURE_STATE_DESTROYED = "destroyed"

# =====================================
# = PLANET SPRITE SHEETS
# =====================================
PLANET_TYPE_MERCURY_PATH = "planets/planet_d.png"
PLANET_TYPE_MARS_PATH = "planets/planet_c.png"
PLANET_TYPE_GANYMEDE_PATH = "planets/planet_e.png"

# =====================================
# = UI STRINGS
# =====================================
MAIN_MENU_NEW_GAME = "New Game"
MAIN_MENU_CONTINUE = "Continue"
MAIN_MENU_OPTIONS = "Options"
MAIN_MENU_HELP = "Help"
MAIN_MENU_QUIT = "Quit"

WINDOW_FACTORY_PRODUCTION = "Factory Production"
WINDOW_GAME_OVER = "Game Over"
WINDOW_MINE_OPERATIONS = "Mine Facility Operations"
WINDOW_STRUCTURE_INSPECTOR = "Structure Details"
WINDOW_TILE_INSPECTOR = "Tile Inspector"
WINDOW_WH_INSPECTOR = "Warehouse Details"

WINDOW_FILEIO_TITLE_LOAD = "Load Game"
WINDOW_FILEIO_TITLE_SAVE = "Save Game"
WINDOW_FILEIO_LOAD = "Load"
WINDOW_FILEIO_SAVE = "Save"

WINDOW_SYSTEM_TITLE = "Options"

WAREHOUSE_EMPTY = "Empty"
WAREHOUSE_FULL = "At Capacity"
WAREHOUSE_SPACE_AVAILABLE = "Space Available"

BUTTON_TAKE_ME_THERE = "Take Me There"

# =====================================
# = STRUCTURE DISABLED REASONS
# =====================================
STRUCTURE_DISABLED_NONE = "Not Disabled"
STRUCTURE_DISABLED_CHAP = "CHAP Facility unavailable"
STRUCTURE_DISABLED_DISCONNECTED = "Not connected to a Command Center"
STRUCTURE_DISABLED_ENERGY = "Insufficient Energy"
STRUCTURE_DISABLED_POPULATION = "Insufficient Population"
STRUCTURE_DISABLED_REFINED_RESOURCES = "Insufficient refned resources"
STRUCTURE_DISABLED_STRUCTURAL_INTEGRITY = "Structural Integrity below operating threshold"

# =====================================
# = STRUCTURE IDLE REASONS
# =====================================
STRUCTURE_IDLE_NONE = "Not Idle"
STRUCTURE_IDLE_PLAYER_SET = "Manually set to Idle"
STRUCTURE_IDLE_INTERNAL_STORAGE_FULL = "Insternal storage pool full"
STRUCTURE_IDLE_FACTORY_PRODUCTION_COMPLETE = "Production complete, waiting on product pull."
STRUCTURE_IDLE_FACTORY_INSUFFICIENT_RESOURCES = "Insufficient resources to continue production"
STRUCTURE_IDLE_FACTORY_INSUFFICIENT_ROBOT_COMMAND_CAPACITY = (
    "Cannot pull robot due to lack of robot command capacity"
)
STRUCTURE_IDLE_FACTORY_INSUFFICIENT_WAREHOUSE_SPACE = (
    "Cannot pull product due to lack of Warehouse space"
)
STRUCTURE_IDLE_MINE_EXHAUSTED = "Mine exhausted"
STRUCTURE_IDLE_MINE_INACTIVE = "Mine inactive"
STRUCTURE_IDLE_INSUFFICIENT_LUXURY_PRODUCT = "Insufficient Luxury Product available"

# =====================================
# = ALERT AND ERROR MESSAGES
# =====================================
ALERT_INVALID_ROBOT_PLACEMENT = "Invalid Robot Action"
ALERT_INVALID_STRUCTURE_ACTION = "Invalid Structure Action"

ALERT_MINE_NOT_EXHAUSTED = (
    "Mines can only be bulldozed after they have been fully extended and are "
    "completely exhausted."
)
ALERT_CANNOT_BULLDOZE_CC = "The Command Center cannot be bulldozed."
ALERT_CANNOT_BULLDOZE_LANDING_SITE = "Landing sites cannot be bulldozed."
ALERT_TILE_BULLDOZED = "This tile has already been bulldozed."

ALERT_DIGGER_EDGE_BUFFER = (
    ROBODIGGER + "'s cannot be placed within 3 tiles of the edge of the site map."
)
ALERT_DIGGER_BLOCKED_BELOW = (
    "The " + ROBODIGGER + " cannot dig down because it is obstructed by something below."
)
ALERT_DIGGER_MINE_TITLE = "Destroy mine?"
ALERT_DIGGER_MINE = (
    "The selected tile contains a mine. Placing a " + ROBODIGGER
    + "here will destroy the mine. Do you want to place a " + ROBODIGGER + " here?"
)

ALERT_MINER_TILE_OBSTRUCTED = (
    "Cannot place " + ROBOMINER + " because there is an object on the selected tile."
)
ALERT_MINER_SURFACE_ONLY = "The " + ROBOMINER + " can only be placed on the surface."
ALERT_MINER_NOT_ON_MINE = "The " + ROBOMINER + " can only be placed on a marked Mine."

ALERT_MAX_DIG_DEPTH = "The maximum digging depth for this planet has already been reached."
ALERT_STRUCTURE_IN_WAY = "A " + ROBODIGGER + " cannot be placed on a Structure."

ALERT_OUT_OF_COMM_RANGE = "The selected tile is out of communications range."

ALERT_LANDER_LOCATION = "Lander Location"
ALERT_SEED_TERRAIN = "The " + SEED_LANDER + " cannot be placed on or near Impassable terrain."
ALERT_SEED_MINE = (
    "The " + SEED_LANDER + " cannot be placed on or near a tile flagged with a Mine."
)
ALERT_SEED_EDGE_BUFFER = (
    SEED_LANDER + "'s cannot be placed within 3 tiles of the edge of the site map."
)

ALERT_LANDER_TILE_OBSTRUCTED = (
    "Cannot place Lander because there is an object on the selected tile."
)
ALERT_LANDER_TERRAIN = "Landers cannot be placed on Impassable Terrain."
ALERT_LANDER_COMM_RANGE = "Landers must be placed within 5 tiles of the Command Center."

ALERT_STRUCTURE_OUT_OF_RANGE = (
    f"Cannot build structures more than {ROBOT_COM_RANGE:f} tiles away from Command Center."
)
ALERT_STRUCTURE_TILE_OBSTRUCTED = (
    "The selected tile already has a structure on it. You must bulldoze the existing "
    "structure in order to build here."
)
ALERT_STRUCTURE_TILE_THING = "The selected tile is occupied by another object."
ALERT_STRUCTURE_TERRAIN = (
    "The selected tile is not bulldozed. Structures can only be built on bulldozed tiles."
)
ALERT_STRUCTURE_MINE_IN_WAY = (
    "The selected tile contains a Mine. Structures cannot be built on Mines."
)
ALERT_STRUCTURE_EXCAVATED = (
    "Structures can only be placed on a tile that has been excavated and bulldozed."
)
ALERT_STRUCTURE_NO_TUBE = "The selected tile has no connection to the Command Center."
ALERT_STRUCTURE_INSUFFICIENT_RESORUCES = (
    "You have insufficient resources to build this Structure. To build this "
    "structure, you will need an additional:\n\n"
)

ALERT_TUBE_INVALID_LOCATION = (
    "Tubes can only be placed on bulldozed tiles that are adjacent to other Tubes and "
    "Structures that have a connection to the Command Center."
)

# =====================================
# = USER INTERFACE
# =====================================
BOTTOM_UI_HEIGHT = 162

MARGIN = 6
MARGIN_TIGHT = 2

MAIN_BUTTON_SIZE = 30
MINI_MAP_BUTTON_SIZE = 20

RESOURCE_ICON_SIZE = 16

RESOURCE_BOX_WIDTH = 200

NO_SELECTION = -1

MINIMUM_DISPLAY_ITEMS = 5

ROBODIGGER_SHEET_ID = 1
ROBODOZER_SHEET_ID = 0
ROBOMINER_SHEET_ID = 2

# Colours as (red, green, blue, alpha).
MINE_COLOR = (255, 0, 0, 255)
ACTIVE_MINE_COLOR = (255, 255, 0, 255)

MOUSE_POINTER_NORMAL = "ui/pointers/normal.png"
MOUSE_POINTER_PLACE_TILE = "ui/pointers/place_tile.png"
MOUSE_POINTER_INSPECT = "ui/pointers/inspect.png"

FONT_PRIMARY = "fonts/opensans.ttf"
FONT_PRIMARY_BOLD = "fonts/opensans-bold.ttf"

FONT_PRIMARY_NORMAL = 10
FONT_PRIMARY_MEDIUM = 14
FONT_PRIMARY_LARGE = 16
FONT_PRIMARY_HUGE = 20


def robot_breakdown_message(robot_name: str, x: int, y: int) -> str:
    """Return the breakdown notice for a robot at tile (x, y)."""
    return ROBOT_BREAKDOWN_MESSAGE % (robot_name, x, y)