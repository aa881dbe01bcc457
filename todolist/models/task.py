from pydantic import BaseModel, Field, StrictBool, StrictStr


class Task(BaseModel):
    """任务模型"""
    description: StrictStr = Field(default="", description="任务描述")
    status: StrictBool = Field(default=False, description="是否已完成")


class ListCreatedResponse(BaseModel):
    """创建清单响应"""
    message: str
    name: str = Field(..., description="清单名称")


class TaskAddedResponse(BaseModel):
    """添加任务响应"""
    message: str
    name: str = Field(..., description="清单名称")
    description: str = Field(..., description="新任务描述")


class TaskChangedResponse(BaseModel):
    """切换/删除任务响应"""
    message: str
    name: str = Field(..., description="清单名称")
    index: int = Field(..., description="任务位置（从 1 开始）")
    task: Task
