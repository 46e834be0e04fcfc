"""timeclock package.

Attendance and time-tracking JSON API organized by feature modules (auth, users,
attendance, requests, ...) with a thin Flask controller layer over service and
repository layers backed by a flat key-value store.
"""
