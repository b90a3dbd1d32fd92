"""
Identify endpoint.

Flow:
    1. Parses the JSON body ({"email"?, "phoneNumber"?})
    2. Coerces a numeric phoneNumber to its string form
    3. Calls IdentityService.identify()
    4. Returns {"contact": {...}}
"""

from __future__ import annotations

import json
import logging

from django.http import HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from linkman.exceptions import ValidationError
from linkman.service import IdentityService

logger = logging.getLogger("linkman.views")


def _identifier(value) -> str | None:
    """JSON value -> identifier string. Numbers become strings, other types are absent."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    return None


class HealthView(View):
    def get(self, request):
        return HttpResponse("Identity Reconciliation Service is running!")


@method_decorator(csrf_exempt, name="dispatch")
class IdentifyView(View):
    """
    POST endpoint for identity resolution.

    Expects:
        JSON object with "email" and/or "phoneNumber" (string or number).

    Responds:
        200 {"contact": {primaryContactId, emails, phoneNumbers, secondaryContactIds}}
        400 {"error": ...} when no identifier is given or the body is not JSON
        500 {"error": "Internal Server Error"} otherwise
    """

    def post(self, request):
        try:
            data = json.loads(request.body)
        except (json.JSONDecodeError, ValueError):
            return JsonResponse({"error": "Invalid JSON"}, status=400)
        if not isinstance(data, dict):
            return JsonResponse({"error": "Invalid JSON"}, status=400)

        email = _identifier(data.get("email"))
        phone_number = _identifier(data.get("phoneNumber"))

        try:
            result = IdentityService.identify(email=email, phone_number=phone_number)
        except ValidationError as exc:
            return JsonResponse({"error": exc.message}, status=400)
        except Exception:
            logger.exception("Identify failed")
            return JsonResponse({"error": "Internal Server Error"}, status=500)

        return JsonResponse({"contact": result.to_dict()})
