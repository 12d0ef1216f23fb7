"""Click subcommands registered by ``graycodec.cli``."""
