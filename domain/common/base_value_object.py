"""值对象基类"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BaseValueObject:
    """
    值对象基类

    值对象不可变，按值比较。子类通过覆盖 validate() 声明自身的约束，
    在实例创建后自动执行。
    """

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """验证值对象的有效性（默认无约束）"""
