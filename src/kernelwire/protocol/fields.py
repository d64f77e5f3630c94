"""Protocol constants.

Keep these in one place to avoid stringly-typed message handling.
"""

# Marker frame separating routing identities from the signed payload.
DELIMITER = b"<IDS|MSG>"

# Header keys, in the order they are written on the wire.
MSG_ID = "msg_id"
USERNAME = "username"
SESSION = "session"
MSG_TYPE = "msg_type"

# Names of the signed JSON frames following the signature, in wire order.
HEADER = "header"
PARENT_HEADER = "parent_header"
METADATA = "metadata"
CONTENT = "content"

PAYLOAD_FIELDS = (HEADER, PARENT_HEADER, METADATA, CONTENT)

# Channel names for a kernel socket group.
SHELL = "shell"
IOPUB = "iopub"
CONTROL = "control"
STDIN = "stdin"
HB = "hb"

CHANNELS = (SHELL, IOPUB, CONTROL, STDIN, HB)

# Common message types; the codec itself does not restrict msg_type.
EXECUTE_REQUEST = "execute_request"
EXECUTE_REPLY = "execute_reply"
STATUS = "status"
