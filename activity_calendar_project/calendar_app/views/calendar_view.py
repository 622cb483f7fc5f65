"""
Month Calendar - Django Views

Handles HTTP requests for the month calendar API.
"""

import logging
import uuid

from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from calendar_app.exceptions import CalendarAppError, CalendarValidationError
from calendar_app.serializers.calendar_serializers import (
    serialize_error_response,
    serialize_exception,
    serialize_month_response
)
from calendar_app.services.calendar_service import CalendarService
from calendar_app.validators.calendar_validators import validate_calendar_request
from core.config import CalendarViewConfig

logger = logging.getLogger(__name__)


@login_required
@require_http_methods(["GET"])
@csrf_exempt  # Safe for read-only GET requests
def month_calendar_api(request, month):
    """
    API endpoint for a month calendar grid.

    URL: /api/calendar/<month>/
    Method: GET

    Path Parameters:
        - month (required): Month in YYYY-MM format (e.g., '2024-02')

    Query Parameters:
        - sport_type (optional, repeatable): Restrict activities to these sport types

    Returns:
        JSON response with the weeks of the grid

    Response Format (Error):
        {
            'success': False,
            'error': 'Invalid month format...',
            'error_code': 'VALIDATION_ERROR',
            'status_code': 400,
            'timestamp': '2024-02-16T15:30:00'
        }
    """
    sport_types = request.GET.getlist('sport_type')
    logger.info(
        f"Calendar API request - user: {request.user.get_username()}, month: {month}, "
        f"sport_types: {sport_types or 'all'}"
    )

    try:
        validated = validate_calendar_request(month, sport_types)

        service = CalendarService()
        data = service.get_month_calendar(validated['month'], validated['sport_types'])

        response_data = serialize_month_response(data, CalendarViewConfig.get_timezone())
        logger.info(
            f"Calendar API success - month: {month}, {response_data['total_days']} days, "
            f"{response_data['total_activities']} activities"
        )
        return JsonResponse(response_data, status=200)

    except CalendarValidationError as e:
        logger.warning(f"Calendar API validation error: {e.message}")
        return JsonResponse(serialize_exception(e), status=e.status_code)

    except CalendarAppError as e:
        logger.error(f"Calendar API error: {e!r} - {e.details}")
        return JsonResponse(serialize_exception(e), status=e.status_code)

    except Exception as e:
        request_id = str(uuid.uuid4())
        logger.error(f"Calendar API server error [{request_id}]: {str(e)}", exc_info=True)
        error_response = serialize_error_response(
            "An unexpected error occurred", status_code=500, error_code="SERVER_ERROR"
        )
        error_response['request_id'] = request_id
        return JsonResponse(error_response, status=500)


@login_required
@require_http_methods(["GET"])
def calendar_config_api(request):
    """
    API endpoint exposing calendar layout configuration.

    URL: /api/calendar/config/
    """
    return JsonResponse({'success': True, 'config': CalendarViewConfig.get_config_dict()})
