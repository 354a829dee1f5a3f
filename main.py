from backprop_net import TrainingLoop, Config, ConfigError


def prompt_int(message: str, default: int) -> int:
    raw = input(f"{message} [{default}]: ").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{message} must be an integer, got {raw!r}") from None


if __name__ == "__main__":
    config = Config()
    config.hidden_count = prompt_int("Enter mid node count", config.hidden_count)
    config.passes = prompt_int("Enter epoch count", config.passes)
    training_loop = TrainingLoop(config)
    training_loop.run()
