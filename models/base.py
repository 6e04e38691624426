# models/base.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    JSON では camelCase (textLength, topWords ...) で入出力するための基底モデル。
    Python 側ではスネークケースのフィールド名でも生成できる。
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
