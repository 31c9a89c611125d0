from SelectKit.model.PersistentFile import PersistentFile
