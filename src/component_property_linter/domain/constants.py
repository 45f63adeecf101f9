"""Closed sets and thresholds shared by detectors and property checks."""

PROPCHECK_BANNER: str = "[PROPCHECK] Component property conformance"

# Always excluded from resolution, whatever the caller passes in.
DEFAULT_IGNORE_PATTERNS: tuple[str, ...] = (
    "node_modules/**",
    ".next/**",
    "out/**",
    "build/**",
    "**/__tests__/**",
    "**/*.test.*",
    "**/*.spec.*",
)

CLIENT_DIRECTIVE: str = "use client"
DIRECTIVE_LINE_WINDOW: int = 5

HOOK_NAMES: tuple[str, ...] = (
    "useState",
    "useEffect",
    "useCallback",
    "useMemo",
    "useRef",
    "useContext",
    "useReducer",
    "useLayoutEffect",
)

BROWSER_GLOBALS: tuple[str, ...] = (
    "window",
    "document",
    "localStorage",
    "sessionStorage",
    "navigator",
)

DEFAULT_COMPONENTS_DIR: str = "components"
DEFAULT_VALID_DIRECTORIES: tuple[str, ...] = (
    "auth",
    "charts",
    "features",
    "providers",
    "species",
    "ui",
)

DEFAULT_MAX_COMPONENT_LINES: int = 200

JSX_MIN_PATTERN_LENGTH: int = 30
JSX_PATTERN_LENGTH: int = 100
JSX_PATTERN_PREVIEW_LENGTH: int = 50
JSX_MAX_REPEATS: int = 2

INTERACTIVE_TAGS: frozenset[str] = frozenset({"button", "a", "input"})
FORM_INPUT_TAGS: frozenset[str] = frozenset(
    {"input", "Input", "textarea", "Textarea", "select", "Select"}
)

COLOR_UTILITY_PREFIXES: tuple[str, ...] = (
    "bg-",
    "text-",
    "border-",
    "ring-",
    "divide-",
    "placeholder-",
    "from-",
    "via-",
    "to-",
)
THEME_TOKEN_MARKERS: tuple[str, ...] = ("var(--", "hsl(var(--")
DARK_VARIANT: str = "dark:"

DYNAMIC_STYLE_MARKERS: tuple[str, ...] = ("${", "props.", "state.")

IMPORT_CATEGORY_ORDER: tuple[str, ...] = ("react", "third-party", "local", "type")

IMPLICIT_ANY_MARKERS: tuple[str, ...] = ("implicitly has an 'any' type",)
UNUSED_CODE_MARKERS: tuple[str, ...] = ("is declared but", "never used", "never read")

DEFAULT_TSC_COMMAND: tuple[str, ...] = ("npx", "--no-install", "tsc")
