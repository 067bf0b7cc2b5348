from coherrest.cli import main

main()
