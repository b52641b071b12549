"""
PrivaChat API

Profile and gamification stats service for the PrivaChat client
- profiles: display name, avatar, bio
- stats: xp / messages / calls counters with atomic increments
"""

__version__ = "1.0.0"
__author__ = "PrivaChat Team"
