"""Page-level fallbacks for unknown routes and uncaught errors."""
from django.shortcuts import render


def custom_404_view(request, exception=None):
    return render(request, '404.html', {'page_title': 'Not Found'}, status=404)


def custom_500_view(request):
    return render(request, '500.html', {
        'request_id': getattr(request, 'request_id', None),
        'page_title': 'Something went wrong',
    }, status=500)
