"""
End-to-end scenario tests for versioned URIs.

Each scenario drives a FastAPI application through TestClient.
"""
