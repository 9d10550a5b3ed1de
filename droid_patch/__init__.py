"""droid-patch - patch byte sequences in the droid binary and install it as an alias."""

import logging

# Silent unless an application (the CLI) configures handlers
logging.getLogger("droid_patch").addHandler(logging.NullHandler())
