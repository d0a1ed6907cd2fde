"""Control layer — parameter discovery and the sampler commands.

Importing this module triggers registration of ParameterReceiver commands
via the @ParameterReceiver.register decorators in controller.py.
"""

from samplerctl.control.controller import ParameterReceiver
from samplerctl.control.inspector import ParameterEnumerator

__all__ = [
    "ParameterReceiver",
    "ParameterEnumerator",
]
