"""CLI commands."""

from tradiestop.cli.commands.auth import login, logout, signup, whoami
from tradiestop.cli.commands.bookings import (
    book,
    change_booking,
    list_bookings,
    reschedule,
)
from tradiestop.cli.commands.dashboard import dashboard, messages
from tradiestop.cli.commands.invoices import (
    create_invoice,
    pay_invoice,
    payments,
    preview_invoice,
)
from tradiestop.cli.commands.notifications import notifications
from tradiestop.cli.commands.reviews import list_reviews, write_review
from tradiestop.cli.commands.settings import company, profile
from tradiestop.cli.commands.support import close_ticket, list_tickets, open_ticket
from tradiestop.cli.commands.users import add_user, delete_user, list_users

ALL_COMMANDS = [
    login,
    logout,
    whoami,
    signup,
    dashboard,
    list_bookings,
    book,
    change_booking,
    reschedule,
    create_invoice,
    preview_invoice,
    pay_invoice,
    payments,
    list_reviews,
    write_review,
    list_tickets,
    open_ticket,
    close_ticket,
    list_users,
    add_user,
    delete_user,
    notifications,
    profile,
    company,
    messages,
]

__all__ = [
    "ALL_COMMANDS",
    "add_user",
    "book",
    "change_booking",
    "close_ticket",
    "company",
    "create_invoice",
    "dashboard",
    "delete_user",
    "list_bookings",
    "list_reviews",
    "list_tickets",
    "list_users",
    "login",
    "logout",
    "messages",
    "notifications",
    "open_ticket",
    "pay_invoice",
    "payments",
    "preview_invoice",
    "profile",
    "reschedule",
    "signup",
    "whoami",
    "write_review",
]
