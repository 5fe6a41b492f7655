"""Read-only selectors over the data snapshot of the current user."""

from tradiestop.views.bookings import (
    BookingRow,
    BookingTab,
    booking_rows,
    bookings_for_user,
    invoice_ids_by_booking,
    page_title,
    sort_by_service_date,
    tabs_for,
    upcoming_for_tradie,
)
from tradiestop.views.dashboards import (
    AdminDashboard,
    ClientDashboard,
    TradieDashboard,
    admin_dashboard,
    client_dashboard,
    latest,
    search_tradies,
    tradie_dashboard,
)
from tradiestop.views.messages import Contact, contacts_for
from tradiestop.views.navigation import header_items, resolve_page, sidebar_items
from tradiestop.views.payments import PaymentsView, invoices_for_user, payments_view
from tradiestop.views.reviews import (
    ReviewsView,
    client_reviews_for,
    pending_reviews,
    reviewed_booking_ids,
    reviews_view,
    tradie_reviews_for,
)
from tradiestop.views.users import search_users

__all__ = [
    "AdminDashboard",
    "BookingRow",
    "BookingTab",
    "ClientDashboard",
    "Contact",
    "PaymentsView",
    "ReviewsView",
    "TradieDashboard",
    "admin_dashboard",
    "booking_rows",
    "bookings_for_user",
    "client_dashboard",
    "client_reviews_for",
    "contacts_for",
    "header_items",
    "invoice_ids_by_booking",
    "invoices_for_user",
    "latest",
    "page_title",
    "payments_view",
    "pending_reviews",
    "resolve_page",
    "reviewed_booking_ids",
    "reviews_view",
    "search_tradies",
    "search_users",
    "sidebar_items",
    "sort_by_service_date",
    "tabs_for",
    "tradie_dashboard",
    "upcoming_for_tradie",
]
