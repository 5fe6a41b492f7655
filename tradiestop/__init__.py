"""TradieStop marketplace client.

Clients book tradespeople, tradies manage their schedule and invoice
completed jobs, admins look after users and support tickets. This package
talks to the TradieStop REST API and keeps the state of one signed-in user.
"""

__version__ = "1.0.0"
