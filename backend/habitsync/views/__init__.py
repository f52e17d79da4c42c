"""
Terminal front end - renders today's habits and drives the load/sync API
"""
