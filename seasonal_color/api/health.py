'''
健康检查接口
-----------
功能：
1. 提供 /health 接口，用于负载均衡器或监控系统检测服务是否存活
2. 返回已加载的参考色数量，确认色板注册表构建成功
'''
from fastapi import APIRouter

from seasonal_color.service.palette.registry import get_palette_registry

router = APIRouter()


@router.get("/health", summary="健康检查接口", description="用于服务存活检测")
def health_check() -> dict:
    """
    检查服务是否正常运行
    """
    return {"status": "ok", "palette_colors": len(get_palette_registry())}
