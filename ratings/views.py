from django.conf import settings
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from recommender.engine import QueryStatus

from .recommender_adapter import (
    get_recommendations_for_user,
    get_similar_users,
    list_users,
)


def _recommender_setting(name: str, default: int) -> int:
    return getattr(settings, "RECOMMENDER", {}).get(name, default)


def _not_found(user_id: str) -> JsonResponse:
    return JsonResponse(
        {
            "user": user_id,
            "status": QueryStatus.USER_NOT_FOUND.value,
            "detail": f"User '{user_id}' not found.",
        },
        status=404,
    )


@require_GET
def users(request):
    return JsonResponse({"users": list_users()})


@require_GET
def similar_users(request, user_id):
    result = get_similar_users(user_id)

    if not result.found:
        return _not_found(user_id)

    return JsonResponse(
        {
            "user": user_id,
            "status": result.status.value,
            "similar_users": [
                {"user": other, "similarity": score}
                for other, score in result
            ],
        }
    )


@require_GET
def recommendations(request, user_id):
    default_count = _recommender_setting("DEFAULT_MAX_RESULTS", 3)
    limit = _recommender_setting("MAX_RESULTS_LIMIT", 50)

    count_text = request.GET.get("count") or None
    try:
        count = int(count_text) if count_text is not None else default_count
    except ValueError:
        count = default_count
    count = min(count, limit)

    result = get_recommendations_for_user(user_id, max_results=count)

    if not result.found:
        return _not_found(user_id)

    return JsonResponse(
        {
            "user": user_id,
            "status": result.status.value,
            "count": count,
            "recommendations": [
                {"item": item_id, "predicted_rating": score}
                for item_id, score in result.scored
            ],
        }
    )
