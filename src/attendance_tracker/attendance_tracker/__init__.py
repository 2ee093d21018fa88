"""Attendance Tracker package.

Organized by feature modules (students, attendance, reports, insights)
with a thin Flask controller layer over service/repository layers.
"""
