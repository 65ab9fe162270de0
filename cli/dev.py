def main() -> None:
    """Run development server."""
    import uvicorn

    uvicorn.run(
        "fraud_monitor.main:create_app",
        host="0.0.0.0",
        port=2022,
        reload=True,
        factory=True,
        log_level="info",
    )
