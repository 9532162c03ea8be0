from hanabi_rules.common_utils.multi_counter import MultiCounter, ValueStats
