from django.http import JsonResponse


def not_found(request, exception=None):
    return JsonResponse({"message": "Not found"}, status=404)


def server_error(request):
    return JsonResponse({"message": "Internal Server Error"}, status=500)
