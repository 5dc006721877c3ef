from datapipeline_check.check_entry import main

if __name__ == "__main__":
    main()
