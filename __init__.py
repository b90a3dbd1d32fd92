"""
Django Linkman - Identity Reconciliation.

Usage:
    from linkman import IdentityService
    from linkman.gates import Gates, GateError, GateResult

    view = IdentityService.identify(email="doc@hillvalley.edu", phone_number="123456")
    view.primary_contact_id
    view.to_dict()

    # Gates validation
    Gates.identifier_presence(email, phone_number)
    Gates.flat_link(contact_id)
"""


def __getattr__(name):
    if name == "IdentityService":
        from linkman.service import IdentityService

        return IdentityService
    if name == "Gates":
        from linkman.gates import Gates

        return Gates
    if name == "GateError":
        from linkman.gates import GateError

        return GateError
    if name == "GateResult":
        from linkman.gates import GateResult

        return GateResult
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["IdentityService", "Gates", "GateError", "GateResult"]
__version__ = "0.1.0"
