# ABOUTME: Campaign type registry - lifecycle management for campaign type configuration
# ABOUTME: Coordinates field layouts, campaign content, hooks, and resave jobs atomically

__version__ = "0.1.0"
