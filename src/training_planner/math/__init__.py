"""Pure calculation modules: periodization and block-level adherence trends."""
