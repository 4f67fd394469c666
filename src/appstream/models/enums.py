"""
enums.py – closed vocabularies of the AppStream metadata format
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Member values are the literal spellings used in the XML documents.
Vocabularies that tolerate forward-compatible values carry an ``UNKNOWN``
member; the owning model keeps the original string next to it.
"""

from __future__ import annotations

from enum import Enum


class ComponentKind(str, Enum):
    """The ``type`` attribute of ``<component>``."""

    RUNTIME = "runtime"
    CONSOLE_APPLICATION = "console-application"
    DESKTOP_APPLICATION = "desktop-application"
    WEB_APPLICATION = "web-application"
    INPUT_METHOD = "inputmethod"
    OS = "operating-system"
    THEME = "theme"
    FIRMWARE = "firmware"
    ADDON = "addon"
    FONT = "font"
    GENERIC = "generic"
    ICON_THEME = "icon-theme"
    LOCALIZATION = "localization"
    DRIVER = "driver"
    CODEC = "codec"


class ArtifactKind(str, Enum):
    SOURCE = "source"
    BINARY = "binary"


class BundleKind(str, Enum):
    LIMBA = "limba"
    FLATPAK = "flatpak"
    APPIMAGE = "appimage"
    SNAP = "snap"
    TARBALL = "tarball"


class ChecksumKind(str, Enum):
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"
    BLAKE2B = "blake2b"
    BLAKE2S = "blake2s"
    BLAKE3 = "blake3"


class SizeKind(str, Enum):
    DOWNLOAD = "download"
    INSTALLED = "installed"


class ImageKind(str, Enum):
    SOURCE = "source"
    THUMBNAIL = "thumbnail"


class ReleaseKind(str, Enum):
    STABLE = "stable"
    DEVELOPMENT = "development"


class ReleaseUrgency(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class IssueKind(str, Enum):
    GENERIC = "generic"
    CVE = "cve"


class FirmwareKind(str, Enum):
    FLASHED = "flashed"
    RUNTIME = "runtime"


class ProvideKind(str, Enum):
    """Child tags of ``<provides>``."""

    LIBRARY = "library"
    BINARY = "binary"
    FONT = "font"
    MODALIAS = "modalias"
    FIRMWARE = "firmware"
    PYTHON2 = "python2"
    PYTHON3 = "python3"
    DBUS = "dbus"
    ID = "id"
    CODEC = "codec"


class ContentState(str, Enum):
    """Intensity of an OARS content attribute."""

    NONE = "none"
    MILD = "mild"
    MODERATE = "moderate"
    INTENSE = "intense"


class ContentRatingVersion(str, Enum):
    """
    OARS version of a ``<content_rating>``.

    Ordering is hand-rolled: ``UNKNOWN`` sorts below both known versions
    whichever side of the comparison it is on.
    """

    OARS_1_0 = "oars-1.0"
    OARS_1_1 = "oars-1.1"
    UNKNOWN = "unknown"

    def compare(self, other: ContentRatingVersion) -> int:
        """Return -1, 0 or 1 like a classic ``cmp``."""
        match (self, other):
            case (ContentRatingVersion.OARS_1_0, ContentRatingVersion.OARS_1_1):
                return -1
            case (ContentRatingVersion.OARS_1_1, ContentRatingVersion.OARS_1_0):
                return 1
            case (ContentRatingVersion.OARS_1_0, ContentRatingVersion.OARS_1_0) | (
                ContentRatingVersion.OARS_1_1,
                ContentRatingVersion.OARS_1_1,
            ):
                return 0
            case (ContentRatingVersion.UNKNOWN, ContentRatingVersion.UNKNOWN):
                return 0
            case (ContentRatingVersion.UNKNOWN, _):
                return -1
            case _:
                return 1

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ContentRatingVersion):
            return NotImplemented
        return self.compare(other) < 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ContentRatingVersion):
            return NotImplemented
        return self.compare(other) > 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ContentRatingVersion):
            return NotImplemented
        return self.compare(other) <= 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ContentRatingVersion):
            return NotImplemented
        return self.compare(other) >= 0


class ProjectUrlKind(str, Enum):
    HOMEPAGE = "homepage"
    HELP = "help"
    DONATION = "donation"
    BUG_TRACKER = "bugtracker"
    TRANSLATE = "translate"
    FAQ = "faq"
    CONTACT = "contact"
    UNKNOWN = "unknown"


class LaunchableKind(str, Enum):
    DESKTOP_ID = "desktop-id"
    SERVICE = "service"
    URL = "url"
    COCKPIT_MANIFEST = "cockpit-manifest"
    UNKNOWN = "unknown"


class TranslationKind(str, Enum):
    GETTEXT = "gettext"
    QT = "qt"
    UNKNOWN = "unknown"


class KudoKind(str, Enum):
    APP_MENU = "AppMenu"
    HI_DPI_ICON = "HiDpiIcon"
    HIGH_CONTRAST = "HighContrast"
    MODERN_TOOLKIT = "ModernToolkit"
    NOTIFICATIONS = "Notifications"
    SEARCH_PROVIDER = "SearchProvider"
    USER_DOCS = "UserDocs"
    UNKNOWN = "unknown"


class CategoryKind(str, Enum):
    """freedesktop.org menu categories (main, additional and reserved)."""

    # Main categories
    AUDIO_VIDEO = "AudioVideo"
    AUDIO = "Audio"
    VIDEO = "Video"
    DEVELOPMENT = "Development"
    EDUCATION = "Education"
    GAME = "Game"
    GRAPHICS = "Graphics"
    NETWORK = "Network"
    OFFICE = "Office"
    SCIENCE = "Science"
    SETTINGS = "Settings"
    SYSTEM = "System"
    UTILITY = "Utility"
    # Additional categories
    BUILDING = "Building"
    DEBUGGER = "Debugger"
    IDE = "IDE"
    GUI_DESIGNER = "GUIDesigner"
    PROFILING = "Profiling"
    REVISION_CONTROL = "RevisionControl"
    TRANSLATION = "Translation"
    CALENDAR = "Calendar"
    CONTACT_MANAGEMENT = "ContactManagement"
    DATABASE = "Database"
    DICTIONARY = "Dictionary"
    CHART = "Chart"
    EMAIL = "Email"
    FINANCE = "Finance"
    FLOW_CHART = "FlowChart"
    PDA = "PDA"
    PROJECT_MANAGEMENT = "ProjectManagement"
    PRESENTATION = "Presentation"
    SPREADSHEET = "Spreadsheet"
    WORD_PROCESSOR = "WordProcessor"
    TWO_D_GRAPHICS = "2DGraphics"
    VECTOR_GRAPHICS = "VectorGraphics"
    RASTER_GRAPHICS = "RasterGraphics"
    THREE_D_GRAPHICS = "3DGraphics"
    SCANNING = "Scanning"
    OCR = "OCR"
    PHOTOGRAPHY = "Photography"
    PUBLISHING = "Publishing"
    VIEWER = "Viewer"
    TEXT_TOOLS = "TextTools"
    DESKTOP_SETTINGS = "DesktopSettings"
    HARDWARE_SETTINGS = "HardwareSettings"
    PRINTING = "Printing"
    PACKAGE_MANAGER = "PackageManager"
    DIALUP = "Dialup"
    INSTANT_MESSAGING = "InstantMessaging"
    CHAT = "Chat"
    IRC_CLIENT = "IRCClient"
    FEED = "Feed"
    FILE_TRANSFER = "FileTransfer"
    HAM_RADIO = "HamRadio"
    NEWS = "News"
    P2P = "P2P"
    REMOTE_ACCESS = "RemoteAccess"
    TELEPHONY = "Telephony"
    TELEPHONY_TOOLS = "TelephonyTools"
    VIDEO_CONFERENCE = "VideoConference"
    WEB_BROWSER = "WebBrowser"
    WEB_DEVELOPMENT = "WebDevelopment"
    MIDI = "Midi"
    MIXER = "Mixer"
    SEQUENCER = "Sequencer"
    TUNER = "Tuner"
    TV = "TV"
    AUDIO_VIDEO_EDITING = "AudioVideoEditing"
    PLAYER = "Player"
    RECORDER = "Recorder"
    DISC_BURNING = "DiscBurning"
    ACTION_GAME = "ActionGame"
    ADVENTURE_GAME = "AdventureGame"
    ARCADE_GAME = "ArcadeGame"
    BOARD_GAME = "BoardGame"
    BLOCKS_GAME = "BlocksGame"
    CARD_GAME = "CardGame"
    KIDS_GAME = "KidsGame"
    LOGIC_GAME = "LogicGame"
    ROLE_PLAYING = "RolePlaying"
    SHOOTER = "Shooter"
    SIMULATION = "Simulation"
    SPORTS_GAME = "SportsGame"
    STRATEGY_GAME = "StrategyGame"
    ART = "Art"
    CONSTRUCTION = "Construction"
    MUSIC = "Music"
    LANGUAGES = "Languages"
    ARTIFICIAL_INTELLIGENCE = "ArtificialIntelligence"
    ASTRONOMY = "Astronomy"
    BIOLOGY = "Biology"
    CHEMISTRY = "Chemistry"
    COMPUTER_SCIENCE = "ComputerScience"
    DATA_VISUALIZATION = "DataVisualization"
    ECONOMY = "Economy"
    ELECTRICITY = "Electricity"
    GEOGRAPHY = "Geography"
    GEOLOGY = "Geology"
    GEOSCIENCE = "Geoscience"
    HISTORY = "History"
    HUMANITIES = "Humanities"
    IMAGE_PROCESSING = "ImageProcessing"
    LITERATURE = "Literature"
    MAPS = "Maps"
    MATH = "Math"
    NUMERICAL_ANALYSIS = "NumericalAnalysis"
    MEDICAL_SOFTWARE = "MedicalSoftware"
    PHYSICS = "Physics"
    ROBOTICS = "Robotics"
    SPIRITUALITY = "Spirituality"
    SPORTS = "Sports"
    PARALLEL_COMPUTING = "ParallelComputing"
    AMUSEMENT = "Amusement"
    ARCHIVING = "Archiving"
    COMPRESSION = "Compression"
    ELECTRONICS = "Electronics"
    EMULATOR = "Emulator"
    ENGINEERING = "Engineering"
    FILE_TOOLS = "FileTools"
    FILE_MANAGER = "FileManager"
    TERMINAL_EMULATOR = "TerminalEmulator"
    FILESYSTEM = "Filesystem"
    MONITOR = "Monitor"
    SECURITY = "Security"
    ACCESSIBILITY = "Accessibility"
    CALCULATOR = "Calculator"
    CLOCK = "Clock"
    TEXT_EDITOR = "TextEditor"
    DOCUMENTATION = "Documentation"
    ADULT = "Adult"
    CORE = "Core"
    KDE = "KDE"
    GNOME = "GNOME"
    XFCE = "XFCE"
    GTK = "GTK"
    QT = "Qt"
    MOTIF = "Motif"
    JAVA = "Java"
    CONSOLE_ONLY = "ConsoleOnly"
    # Reserved categories
    SCREENSAVER = "Screensaver"
    TRAY_ICON = "TrayIcon"
    APPLET = "Applet"
    SHELL = "Shell"
    UNKNOWN = "unknown"


class Compare(str, Enum):
    """Relation used by ``display_length`` and versioned ``id`` requirements."""

    EQ = "eq"
    NE = "ne"
    LT = "lt"
    GT = "gt"
    LE = "le"
    GE = "ge"


class Side(str, Enum):
    LONGEST = "longest"
    SHORTEST = "shortest"


class DisplayLengthSize(str, Enum):
    """Named display sizes; see :class:`DisplayLengthRequirement`."""

    XSMALL = "xsmall"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"


class Control(str, Enum):
    """Input methods a component supports or requires."""

    POINTING = "pointing"
    KEYBOARD = "keyboard"
    CONSOLE = "console"
    TABLET = "tablet"
    TOUCH = "touch"
    GAMEPAD = "gamepad"
    TV_REMOTE = "tv-remote"
    VOICE = "voice"
    VISION = "vision"


__all__ = [
    "ArtifactKind",
    "BundleKind",
    "CategoryKind",
    "ChecksumKind",
    "ComponentKind",
    "Compare",
    "ContentRatingVersion",
    "ContentState",
    "Control",
    "DisplayLengthSize",
    "FirmwareKind",
    "ImageKind",
    "IssueKind",
    "KudoKind",
    "LaunchableKind",
    "ProjectUrlKind",
    "ProvideKind",
    "ReleaseKind",
    "ReleaseUrgency",
    "SizeKind",
    "Side",
    "TranslationKind",
]
