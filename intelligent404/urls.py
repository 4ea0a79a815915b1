"""URL configuration for the intelligent404 app.

The catch-all page route must come last so that fixed routes such as the
search page take precedence.
"""

from django.urls import path

from . import views

app_name = 'intelligent404'

urlpatterns = [
    path('', views.home, name='home'),
    path('search/', views.search, name='search'),
    path('<path:url_path>/', views.page_detail, name='page'),
]
