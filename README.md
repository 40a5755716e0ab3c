# lanmsg

Building blocks for a LAN messenger, with no user interface and no dependencies outside the standard library:

- `lanmsg.datastream`: big-endian binary serialisation of strings (UTF-16BE with a 32-bit byte count, `None` as a null string), 16/32/64-bit signed integers and byte blocks (`DataWriter`, `DataReader`).
- `lanmsg.history`: a single-file store of saved conversations, kept as a linked list of index records (`History`, `DBHeader`, `MsgInfo`, `HistoryError`).
- `lanmsg.filemodel`: the list of file transfers shown to the user, which can be saved to disk and loaded back (`FileModel`, `FileView`, `TransferMode`, `TransferState`, `write_file_view`, `read_file_view`).
- `lanmsg.chathelper`: HTML escaping and conversion between smiley text codes and smiley images (`Smiley`, `make_html_safe`, `replace_smiley`, `encode_smileys`, `decode_smileys`).
- `lanmsg.usertree`: a checkable tree of groups and users, for picking broadcast recipients (`CheckableUserTree`).
- `lanmsg.chatstate`: typing-state tracking: blank, active, composing, paused and inactive (`ChatStateTracker`, `ChatState`).
- `lanmsg.conversation`: information-line text, window titles and notification titles for a conversation (`InfoFlag`, `StatusType`, `status_message`, `update_flags`, `flags_for_status`, `window_title`, `incoming_title`).
- `lanmsg.imagegrid`: the layout of an image picker grid and how a cell is picked (`ImageGrid`).

## Install

```
pip install .
```

With the test tools:

```
pip install .[test]
```

## Example: conversation history

```python
from datetime import datetime
from lanmsg.history import History

history = History("messenger.db")
history.save("Bob", datetime.now(), "<p>hi</p>")
for info in history.get_list():
    print(info.name, info.date, history.get_message(info.offset))
```

`History.clear()` deletes the file. A file that does not start with the history marker raises `HistoryError`.

## Example: broadcast recipients

```python
from lanmsg.usertree import CheckableUserTree

tree = CheckableUserTree()
tree.add_group("friends", ["alice", "bob"])
tree.select_all()
tree.set_user_checked("bob", False)
print(tree.checked_users())             # ['alice']
print(tree.is_group_checked("friends"))  # False
```

## Example: typing state

```python
from lanmsg.chatstate import ChatStateTracker

sent = []
tracker = ChatStateTracker(notify=sent.append, schedule=lambda delay: None)
tracker.key_pressed()           # composing, sent to peers
tracker.check(text_empty=False)  # no new keys since: paused
print([state.value for state in sent])  # ['composing', 'paused']
```

The tracker keeps no timer of its own: `schedule` is told when `check()` should be called again, and the caller arranges that.

## What this package does not do

It has no network layer, no message encryption, no program to run and no windows. It does not send or receive anything: callbacks such as `ChatStateTracker.notify` and `ImageGrid.on_select` only report what should be sent or shown, and the caller must carry it out.

## Tests

```
pytest
```