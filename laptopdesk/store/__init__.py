from laptopdesk.store.record_store import RecordStore, Transaction

__all__ = ["RecordStore", "Transaction"]
