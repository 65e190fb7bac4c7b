"""
Blog Content API: posts and comments with ownership-based access control.
"""
