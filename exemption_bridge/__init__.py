"""
Exemption Bridge - Battery-optimization exemption negotiation

Negotiates, on behalf of an application, exemption from the host
platform's background-execution power-management policy so the
application keeps running notifications and timers while the device
is idle.

Outcome contract:
- True: exemption is held, was already held, or the direct prompt was shown
- False: the user must act manually, or prompting failed
- An outcome is always produced; platform failures never reach the caller
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
