import uvicorn
from rich import print

from app import config


CONFIG = config.Config()


def main() -> None:
    print(f"Serving Dinner App on http://{CONFIG.host}:{CONFIG.port} ({CONFIG.env.value})")
    uvicorn.run(
        "app.app:app",
        host=CONFIG.host,
        port=CONFIG.port,
        reload=CONFIG.env == config.Env.local,
        log_level=CONFIG.log_level.lower(),
    )


if __name__ == "__main__":
    main()
