from pydantic import BaseModel, ConfigDict, Field, computed_field


class RenameModel(BaseModel):
    """Base model with camelCase serialization aliases."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ChangeEntry(RenameModel):
    old_class: str = Field(alias="oldClass")
    new_class: str = Field(alias="newClass")

    @property
    def old_selector(self) -> str:
        return f".{self.old_class}"

    @property
    def new_selector(self) -> str:
        return f".{self.new_class}"


SelectorIndex = dict[str, ChangeEntry]


class FileDiffRecord(RenameModel):
    file: str
    line: int
    old_class: str = Field(alias="oldClass")
    new_class: str = Field(alias="newClass")


class Summary(RenameModel):
    modified_files: list[str] = Field(default_factory=list, alias="modifiedFiles")
    changes: list[FileDiffRecord] = Field(default_factory=list)

    @computed_field(alias="totalChanges")
    @property
    def total_changes(self) -> int:
        return len(self.changes)

    @property
    def has_changes(self) -> bool:
        return self.total_changes > 0

    def to_json_dict(self) -> dict:
        data = self.model_dump(by_alias=True)
        return {
            "totalChanges": data["totalChanges"],
            "modifiedFiles": data["modifiedFiles"],
            "changes": data["changes"],
        }
