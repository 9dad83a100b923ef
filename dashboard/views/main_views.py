from django.shortcuts import render


def landing_view(request):
    return render(request, 'pages/landing.html', {'page_title': 'Welcome'})
