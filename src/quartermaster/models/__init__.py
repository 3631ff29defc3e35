"""Data models for quartermaster.

Import from submodules:
- item: ItemType, ITEM_TYPES, DiscoveredItem, GroupedItems
- sets: SetDefinition, SetsManifest
- link: ResolvedInstall, RemoveTarget, LinkResult, TargetState, ItemResult
- config: QuartermasterConfig, ConfigScope
"""
