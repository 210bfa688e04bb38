"""
通用数据访问服务

每个实体一个 CrudService 实例, 提供统一的 create / get / update / delete / list:
- 写操作都是单个事务: 成功提交, 失败回滚并抛出对应异常
- 唯一性、必填、外键引用在写入前显式校验, 数据库约束作为兜底 (IntegrityError 也会被转换)
- 删除时先检查 ON DELETE RESTRICT 的依赖记录; CASCADE / SET NULL 由数据库外键执行
- list 返回 RowStream, 遍历时才查询, 每次遍历都会重新查询
"""

import logging
from typing import Any, Callable, Optional

from pydantic import BaseModel, ValidationError
from sqlalchemy import select, func, and_, not_, UniqueConstraint
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from clinic.core.config import settings
from clinic.core.exception_handler import NotFound, ConstraintViolation, ReferentialRestrict
from clinic.db.base import Base

logger = logging.getLogger(__name__)


class RowStream:
    """惰性、可重复遍历的查询结果

    构造时不访问数据库; 每次 ``async for`` 都重新执行查询,
    按 page_size 分页拉取, 因此可以遍历多次, 每次看到的都是当前数据。
    """

    def __init__(self, db: AsyncSession, statement, page_size: int = None):
        self.db = db
        self.statement = statement
        self.page_size = page_size or settings.LIST_PAGE_SIZE

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        offset = 0
        while True:
            page = (
                self.statement
                .limit(self.page_size)
                .offset(offset)
                .execution_options(populate_existing=True)
            )
            result = await self.db.execute(page)
            rows = result.scalars().all()
            for row in rows:
                yield row
            if len(rows) < self.page_size:
                break
            offset += self.page_size

    async def all(self) -> list:
        return [row async for row in self]


class CrudService:
    """单个实体(表)的数据访问服务"""

    def __init__(
        self,
        model,
        create_schema: type[BaseModel],
        update_schema: type[BaseModel],
        filters: Optional[dict[str, Callable[[Any], Any]]] = None,
        order_by: Optional[list] = None,
    ):
        self.model = model
        self.table = model.__table__
        self.label = self.table.name
        self.create_schema = create_schema
        self.update_schema = update_schema
        # 额外的过滤条件: 名称 -> 生成 where 子句的函数, 其余按列等值过滤
        self.filters = filters or {}
        self.pk_columns = list(self.table.primary_key.columns)
        self.order_by = order_by or self.pk_columns

    # ====== 对外操作 ======

    async def create(self, db: AsyncSession, data):
        values = self.prepare_values(self._to_values(data, self.create_schema, partial=False))
        self._check_required(values)
        await self._check_references(db, values)
        await self._check_unique(db, values)

        obj = self.model(**values)
        db.add(obj)
        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            logger.warning(f"创建 {self.label} 失败: {e.orig}")
            raise ConstraintViolation(f"{self.label} 违反约束: {e.orig}") from e
        await db.refresh(obj)

        logger.info(f"创建 {self.label} 成功: {self._describe(self._ident_of(obj))}")
        return obj

    async def get(self, db: AsyncSession, *ident):
        key = ident[0] if len(ident) == 1 else tuple(ident)
        # populate_existing: 绕过 identity map, 读到数据库里级联/置空之后的值
        obj = await db.get(self.model, key, populate_existing=True)
        if obj is None:
            raise NotFound(f"{self.label} {self._describe(ident)} 不存在")
        return obj

    async def update(self, db: AsyncSession, *ident, data):
        obj = await self.get(db, *ident)
        values = self.prepare_values(self._to_values(data, self.update_schema, partial=True))
        if not values:
            return obj

        pk_keys = {col.key for col in self.pk_columns}
        if pk_keys & values.keys():
            raise ConstraintViolation(f"{self.label} 主键不可修改")
        self._check_required(values)
        await self._check_references(db, values)
        await self._check_unique(db, values, current=obj)

        for key, value in values.items():
            setattr(obj, key, value)
        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            logger.warning(f"更新 {self.label} 失败: {e.orig}")
            raise ConstraintViolation(f"{self.label} 违反约束: {e.orig}") from e
        await db.refresh(obj)

        logger.info(f"更新 {self.label} 成功: {self._describe(ident)}, 字段={sorted(values)}")
        return obj

    async def delete(self, db: AsyncSession, *ident) -> None:
        obj = await self.get(db, *ident)
        await self._check_restrict(db, obj)

        await db.delete(obj)
        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            logger.warning(f"删除 {self.label} 失败: {e.orig}")
            raise ReferentialRestrict(f"{self.label} {self._describe(ident)} 仍被引用, 禁止删除") from e

        # 级联删除/置空发生在数据库里, 清空 identity map 避免读到旧对象
        db.expunge_all()
        logger.info(f"删除 {self.label} 成功: {self._describe(ident)}")

    def list(self, db: AsyncSession, **filters) -> RowStream:
        statement = select(self.model)
        for key, value in filters.items():
            if value is None:
                continue
            if key in self.filters:
                statement = statement.where(self.filters[key](value))
            elif key in self.table.columns:
                statement = statement.where(self.table.columns[key] == value)
            else:
                raise TypeError(f"{self.label} 不支持的过滤条件: {key}")
        return RowStream(db, statement.order_by(*self.order_by))

    # ====== 子类可覆盖 ======

    def prepare_values(self, values: dict) -> dict:
        """入库前的字段转换"""
        return values

    # ====== 约束校验 ======

    def _to_values(self, data, schema: type[BaseModel], partial: bool) -> dict:
        if not isinstance(data, BaseModel):
            try:
                data = schema.model_validate(data)
            except ValidationError as e:
                raise ConstraintViolation(f"{self.label} 字段校验失败: {e.errors(include_url=False)}") from e
        return data.model_dump(exclude_unset=partial)

    def _check_required(self, values: dict):
        for key, value in values.items():
            column = self.table.columns.get(key)
            if column is not None and value is None and not column.nullable:
                raise ConstraintViolation(f"{self.label}.{key} 不能为空")

    async def _check_references(self, db: AsyncSession, values: dict):
        for fk in self.table.foreign_keys:
            value = values.get(fk.parent.key)
            if value is None:
                continue
            target = fk.column
            count = await db.scalar(
                select(func.count()).select_from(target.table).where(target == value)
            )
            if not count:
                raise ConstraintViolation(
                    f"{self.label}.{fk.parent.key}={value} 引用的 {target.table.name} 记录不存在"
                )

    def _unique_column_sets(self):
        column_sets = {}
        for constraint in self.table.constraints:
            if isinstance(constraint, UniqueConstraint):
                columns = tuple(constraint.columns)
                column_sets[tuple(col.key for col in columns)] = columns
        for col in self.table.columns:
            if col.unique:
                column_sets[(col.key,)] = (col,)
        # 关联表的复合主键由调用方提供, 也要校验重复
        if len(self.pk_columns) > 1:
            column_sets[tuple(col.key for col in self.pk_columns)] = tuple(self.pk_columns)
        return list(column_sets.values())

    async def _check_unique(self, db: AsyncSession, values: dict, current=None):
        for columns in self._unique_column_sets():
            keys = [col.key for col in columns]
            if not any(key in values for key in keys):
                continue
            merged = {key: values[key] if key in values else getattr(current, key, None) for key in keys}
            # NULL 不参与唯一性比较
            if any(value is None for value in merged.values()):
                continue

            statement = select(func.count()).select_from(self.table).where(
                *[col == merged[col.key] for col in columns]
            )
            if current is not None:
                statement = statement.where(
                    not_(and_(*[col == getattr(current, col.key) for col in self.pk_columns]))
                )
            if await db.scalar(statement):
                raise ConstraintViolation(f"{self.label} 已存在 {merged} 的记录")

    async def _check_restrict(self, db: AsyncSession, obj):
        for table in Base.metadata.sorted_tables:
            for fk in table.foreign_keys:
                if fk.column.table is not self.table:
                    continue
                if (fk.ondelete or "").upper() != "RESTRICT":
                    continue
                value = getattr(obj, fk.column.key)
                count = await db.scalar(
                    select(func.count()).select_from(table).where(fk.parent == value)
                )
                if count:
                    raise ReferentialRestrict(
                        f"{self.label} {fk.column.key}={value} 仍被 {count} 条 {table.name} 记录引用, 禁止删除"
                    )

    # ====== 辅助 ======

    def _ident_of(self, obj) -> tuple:
        return tuple(getattr(obj, col.key) for col in self.pk_columns)

    def _describe(self, ident) -> str:
        return ", ".join(f"{col.key}={value}" for col, value in zip(self.pk_columns, ident))
