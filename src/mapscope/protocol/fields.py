"""Protocol constants.

Keep these in one place to avoid stringly-typed message handling. The
topic segment vocabularies are documentation for callers; the builders
accept any string in any segment.
"""

TOPIC_SEPARATOR = "/"
TOPIC_SEGMENTS = 6

# JSON field names of a protocol message.
TOPIC = "topic"
PATH = "path"
HEADERS = "headers"
VALUE = "value"
STATUS = "status"
EXTRA = "extra"

# Affected group.
THINGS = "things"

# Channel.
TWIN = "twin"
LIVE = "live"

# Criterion.
COMMANDS = "commands"
EVENTS = "events"
SEARCH = "search"
MESSAGES = "messages"
ERRORS = "errors"

# Action.
CREATE = "create"
RETRIEVE = "retrieve"
MODIFY = "modify"
DELETE = "delete"

GROUPS = frozenset((THINGS,))
CHANNELS = frozenset((TWIN, LIVE))
CRITERIA = frozenset((COMMANDS, EVENTS, SEARCH, MESSAGES, ERRORS))
ACTIONS = frozenset((CREATE, RETRIEVE, MODIFY, DELETE))
