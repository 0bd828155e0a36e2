from demo_viewer.app_factory import create_app


def _banner(host: str, port: int) -> str:
    rule = "=" * 60
    return "\n".join([
        "",
        rule,
        "  Demo Viewer",
        rule,
        f"  -> Local:   http://localhost:{port}",
        f"  -> Network: http://{host}:{port}",
        rule,
        "",
        "  Press Ctrl+C to stop",
        "",
    ])


def main() -> None:
    app = create_app()
    print(_banner(app.config["HOST"], app.config["PORT"]))
    # Failing to bind the port is the one fatal error; let it propagate
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])


if __name__ == "__main__":
    main()
