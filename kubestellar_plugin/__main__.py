print("This is a KubeStellar plugin, not a standalone executable")
