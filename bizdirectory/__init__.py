# package marker for bizdirectory
