"""
Latest Report Sync.

Azure Functions blob trigger that downloads the most recently modified blob
of a container into a local reports directory.
"""

__version__ = "1.0.0"
