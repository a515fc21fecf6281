"""配置常量和环境变量加载"""

import os

SERVER_NAME = "comverter"

# 模糊匹配配置
FUZZY_MATCH_THRESHOLD = float(os.getenv("COMVERTER_FUZZY_THRESHOLD", "0.6"))  # 家族名模糊匹配阈值
MAX_SUGGESTIONS = 3  # 最多给出几个候选家族名
