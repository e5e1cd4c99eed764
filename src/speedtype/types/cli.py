from dataclasses import dataclass


@dataclass
class CLIArgs:
    """
    Properties:
    - setting: Path to setting.yaml file.
    """
    setting: str
