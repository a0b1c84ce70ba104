import time

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods

from matching.backend.grep_service import GrepService, grep_setting
from matching.backend.regex_engine.engine import RegexEngine


def bad_request(message):
    return JsonResponse({"error": message}, status=400)


@require_GET
def match_api(request):
    """
    GET /api/match?pattern=...&line=...
    Single line test, {"matched": true|false}
    """
    pattern = request.GET.get("pattern")
    if pattern is None:
        return bad_request("missing 'pattern'")
    line = request.GET.get("line", "")

    return JsonResponse({
        "pattern": pattern,
        "line": line,
        "matched": RegexEngine(pattern).matches(line),
    })


@csrf_exempt
@require_http_methods(["GET", "POST"])
def search_api(request):
    """
    GET|POST /api/search with pattern=... and text=... (one line per row)
    Returns the matching lines with their 1-based line numbers.
    """
    params = request.POST if request.method == "POST" else request.GET
    pattern = params.get("pattern")
    if pattern is None:
        return bad_request("missing 'pattern'")
    text = params.get("text", "")

    start = time.time()
    found = GrepService.search_text(pattern, text)
    elapsed = (time.time() - start) * 1000.0

    # total counts every matching line, results stop at SEARCH_LIMIT
    limit = grep_setting("SEARCH_LIMIT", 200)
    return JsonResponse({
        "total": len(found),
        "elapsed_ms": elapsed,
        "results": [r.as_dict() for r in found[:limit]],
    })
