"""
Daily habit tracker backed by a Notion database
"""
