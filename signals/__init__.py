"""
Linkman signals - public event API.

Emitted signals (after the resolving transaction commits its work):
- contact_created: Emitted by services.identity.resolve() for new primaries and secondaries
- contact_demoted: Emitted when a merge turns a primary into a secondary
"""

from django.dispatch import Signal

# Contact signals (emitted by services)
contact_created = Signal()  # sender=Contact, contact=Contact
contact_demoted = Signal()  # sender=Contact, contact=Contact, primary=Contact
