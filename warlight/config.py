# ===== GAME DEFAULTS =====
class GameDefaults:
    """Default values used until the engine tells us otherwise."""

    # Armies each player may place per turn before any continent bonus
    ARMIES_PER_TURN = 5

    # Armies a region holds when it is first created
    REGION_ARMIES = 2

    # Number of starting regions the engine expects back
    STARTING_REGION_PICKS = 6


# ===== PROTOCOL =====
class ProtocolConfig:
    """Keywords and fixed strings of the engine's line protocol."""

    # Owner of a region we know nothing about, and of a continent without a single owner
    UNKNOWN_OWNER = "unknown"

    # Response sent when a bot has nothing to do
    NO_MOVES = "No moves"
    MOVE_SEPARATOR = ", "

    # Top-level commands
    SETTINGS = "settings"
    SETUP_MAP = "setup_map"
    PICK_STARTING_REGIONS = "pick_starting_regions"
    UPDATE_MAP = "update_map"
    OPPONENT_MOVES = "opponent_moves"
    GO = "go"

    # Sub-commands
    YOUR_BOT = "your_bot"
    OPPONENT_BOT = "opponent_bot"
    STARTING_ARMIES = "starting_armies"
    SUPER_REGIONS = "super_regions"
    REGIONS = "regions"
    NEIGHBORS = "neighbors"
    PLACE_ARMIES = "place_armies"
    ATTACK_TRANSFER = "attack/transfer"


# ===== LOGGING =====
class LogConfig:
    """Logging setup. Logs go to stderr, stdout belongs to the engine."""

    LEVEL = "ERROR"
    LEVEL_ENV_VAR = "WARLIGHT_LOG_LEVEL"
    FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
