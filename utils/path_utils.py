from pathlib import Path


# 获取项目根目录
BASE_DIR = Path(__file__).resolve().parents[1]

# 配置目录
CONFIG_DIR = BASE_DIR / 'config'

# .env 文件路径
ENV_FILE = BASE_DIR / '.env'


def resolve_path(path: str) -> Path:
    """相对路径按项目根目录解析"""
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = BASE_DIR / candidate
    return candidate
